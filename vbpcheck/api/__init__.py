"""API module for vbpcheck.

Command functions (``cmd_*``) defined under this package return a StageResult
and are the single source of truth for the CLI.
"""

__all__ = []
