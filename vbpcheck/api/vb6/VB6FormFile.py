"""Parsed VB6 form (.frm)."""

import re
from dataclasses import dataclass, field

from ._skip_blank import _skip_blank
from .parse_attributes import parse_attributes
from .parse_property import parse_property
from .parse_source import parse_source
from .VB6ErrorKind import VB6ErrorKind
from .VB6ParseError import VB6ParseError

_VERSION = re.compile(r"^VERSION\s+(\d+\.\d+)$", re.IGNORECASE)
_OBJECT = re.compile(r"^Object\s*=", re.IGNORECASE)


@dataclass(frozen=True)
class VB6FormFile:
    """Header of a form: version, the form control and its nested controls."""

    name: str
    version: str
    form_type: str
    controls: list[tuple[str, str]] = field(default_factory=list)
    objects: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, file_name: str, contents: bytes) -> "VB6FormFile":
        """Parse form bytes.

        Raises:
            VB6ParseError: If the VERSION header, the control tree or the
                attribute block is missing or malformed.
        """
        return parse_source(file_name, contents, cls._parse_lines)

    @classmethod
    def _parse_lines(cls, file_name: str, lines: list[str]) -> "VB6FormFile":
        index = _skip_blank(lines, 0)
        match = _VERSION.match(lines[index].strip()) if index < len(lines) else None
        if match is None:
            raise VB6ParseError(file_name, VB6ErrorKind.VERSION_HEADER_MISSING, index + 1)

        objects: list[str] = []
        index = _skip_blank(lines, index + 1)
        while index < len(lines) and _OBJECT.match(lines[index].strip()):
            objects.append(lines[index].strip().partition("=")[2].strip())
            index = _skip_blank(lines, index + 1)

        controls: list[tuple[str, str]] = []
        depth = 0
        while True:
            if index >= len(lines):
                if depth == 0:
                    raise VB6ParseError(file_name, VB6ErrorKind.BLOCK_BEGIN_MISSING, len(lines))
                raise VB6ParseError(file_name, VB6ErrorKind.UNTERMINATED_BLOCK, len(lines))
            stripped = lines[index].strip()
            index += 1
            if not stripped:
                continue
            keyword = stripped.split(None, 1)[0].lower()
            if keyword == "begin":
                parts = stripped.split()
                if len(parts) != 3:
                    raise VB6ParseError(file_name, VB6ErrorKind.CONTROL_HEADER_MALFORMED, index, stripped)
                controls.append((parts[1], parts[2]))
                depth += 1
            elif keyword == "beginproperty":
                if depth == 0:
                    raise VB6ParseError(file_name, VB6ErrorKind.BLOCK_BEGIN_MISSING, index)
                depth += 1
            elif keyword in ("end", "endproperty"):
                if depth == 0:
                    raise VB6ParseError(file_name, VB6ErrorKind.UNEXPECTED_END, index)
                depth -= 1
                if depth == 0:
                    break
            elif depth == 0:
                raise VB6ParseError(file_name, VB6ErrorKind.BLOCK_BEGIN_MISSING, index)
            else:
                parse_property(file_name, stripped, index)

        name, attributes, _ = parse_attributes(file_name, lines, index)
        form_type, _ = controls[0]
        return cls(
            name=name,
            version=match.group(1),
            form_type=form_type,
            controls=controls[1:],
            objects=objects,
            attributes=attributes,
        )
