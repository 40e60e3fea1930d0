"""CLI constants."""

DISPLAY_FORMATS = ("text", "json", "yaml")
DEFAULT_DISPLAY_FORMAT = "text"
