"""Parse a ``Name = value`` line from a VB6 header block."""

from .VB6ErrorKind import VB6ErrorKind
from .VB6ParseError import VB6ParseError


def _strip_comment(value: str) -> str:
    if value.startswith('"'):
        closing = value.find('"', 1)
        return value[: closing + 1] if closing != -1 else value
    return value.split("'", 1)[0].rstrip()


def parse_property(file_name: str, line: str, line_number: int) -> tuple[str, str]:
    """Split a header property line into its name and (comment-free) value.

    Quoted values keep their quotes; ``'`` comments after unquoted values are dropped.
    """
    name, sep, value = line.partition("=")
    name = name.strip()
    if not sep or not name:
        raise VB6ParseError(file_name, VB6ErrorKind.PROPERTY_MALFORMED, line_number, line.strip())
    return name, _strip_comment(value.strip())
