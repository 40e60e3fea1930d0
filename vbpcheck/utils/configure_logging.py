import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int | str = logging.WARNING, log_file: Path | None = None) -> None:
    """Configure the ``vbpcheck`` logger.

    Args:
        level: Logging level name or number
        log_file: Optional file that receives a rotating copy of the log
    """
    global _CONFIGURED

    root_logger = logging.getLogger("vbpcheck")
    root_logger.setLevel(level)
    if _CONFIGURED:
        return

    formatter = logging.Formatter(_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _CONFIGURED = True
