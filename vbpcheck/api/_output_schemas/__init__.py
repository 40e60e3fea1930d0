"""Output schemas for API commands - enforces consistent output structure.

Each command has a Pydantic model that defines its output structure.
Importing this package registers every schema.
"""

from . import project  # noqa: F401
