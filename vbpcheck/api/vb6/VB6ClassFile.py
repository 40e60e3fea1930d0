"""Parsed VB6 class module (.cls)."""

import re
from dataclasses import dataclass, field

from ._skip_blank import _skip_blank
from .parse_attributes import parse_attributes
from .parse_property import parse_property
from .parse_source import parse_source
from .VB6ErrorKind import VB6ErrorKind
from .VB6ParseError import VB6ParseError

_VERSION = re.compile(r"^VERSION\s+(\d+\.\d+)\s+CLASS$", re.IGNORECASE)


@dataclass(frozen=True)
class VB6ClassFile:
    """Header of a class module: version, BEGIN properties and attributes."""

    name: str
    version: str
    properties: dict[str, str] = field(default_factory=dict)
    attributes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, file_name: str, contents: bytes) -> "VB6ClassFile":
        """Parse class module bytes.

        Raises:
            VB6ParseError: If the header is missing or malformed.
        """
        return parse_source(file_name, contents, cls._parse_lines)

    @classmethod
    def _parse_lines(cls, file_name: str, lines: list[str]) -> "VB6ClassFile":
        index = _skip_blank(lines, 0)
        match = _VERSION.match(lines[index].strip()) if index < len(lines) else None
        if match is None:
            raise VB6ParseError(file_name, VB6ErrorKind.VERSION_HEADER_MISSING, index + 1)

        index = _skip_blank(lines, index + 1)
        if index >= len(lines) or lines[index].strip().upper() != "BEGIN":
            raise VB6ParseError(file_name, VB6ErrorKind.BLOCK_BEGIN_MISSING, index + 1)

        properties: dict[str, str] = {}
        index += 1
        while True:
            if index >= len(lines):
                raise VB6ParseError(file_name, VB6ErrorKind.UNTERMINATED_BLOCK, len(lines))
            stripped = lines[index].strip()
            index += 1
            if stripped.upper() == "END":
                break
            if stripped:
                key, value = parse_property(file_name, stripped, index)
                properties[key] = value

        name, attributes, _ = parse_attributes(file_name, lines, index)
        return cls(name=name, version=match.group(1), properties=properties, attributes=attributes)
