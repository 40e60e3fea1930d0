"""Configuration models for vbpcheck."""

from .CheckConfig import CheckConfig
from .LogConfig import LogConfig
from .VbpcheckConfig import VbpcheckConfig

__all__ = ["CheckConfig", "LogConfig", "VbpcheckConfig"]
