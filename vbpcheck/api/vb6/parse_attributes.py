"""Parse the ``Attribute`` header that follows a VB6 file's BEGIN block."""

import re

from .VB6ErrorKind import VB6ErrorKind
from .VB6ParseError import VB6ParseError

_ATTRIBUTE = re.compile(r"^Attribute\s+(\w+)\s*=\s*(.*)$", re.IGNORECASE)


def parse_attributes(file_name: str, lines: list[str], start: int) -> tuple[str, dict[str, str], int]:
    """Read consecutive ``Attribute`` lines starting at index ``start``.

    Returns:
        Tuple of (VB_Name value, all attributes with quotes removed, index of the
        first line after the attribute block)

    Raises:
        VB6ParseError: ATTRIBUTE_NAME_MISSING if the block has no VB_Name.
    """
    attributes: dict[str, str] = {}
    index = start
    while index < len(lines):
        stripped = lines[index].strip()
        if not stripped:
            index += 1
            continue
        match = _ATTRIBUTE.match(stripped)
        if match is None:
            break
        attributes[match.group(1)] = match.group(2).strip().strip('"')
        index += 1

    name = next((value for key, value in attributes.items() if key.lower() == "vb_name"), "")
    if not name:
        raise VB6ParseError(file_name, VB6ErrorKind.ATTRIBUTE_NAME_MISSING, min(index, len(lines)) + 1)
    return name, attributes, index
