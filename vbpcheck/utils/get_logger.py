import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``vbpcheck`` namespace."""
    return logging.getLogger(f"vbpcheck.{name}")
