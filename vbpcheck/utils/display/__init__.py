"""Display abstraction shared by the CLI."""

from .Display import Display

__all__ = ["Display"]
