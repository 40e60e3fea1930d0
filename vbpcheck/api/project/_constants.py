"""Constants for project checking."""

PROJECT_EXTENSION = ".vbp"
