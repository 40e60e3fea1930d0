"""Parsed VB6 standard module (.bas)."""

from dataclasses import dataclass, field

from .parse_attributes import parse_attributes
from .parse_source import parse_source


@dataclass(frozen=True)
class VB6ModuleFile:
    """Header of a standard module; a module starts directly with its attributes."""

    name: str
    attributes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, file_name: str, contents: bytes) -> "VB6ModuleFile":
        """Parse standard module bytes.

        Raises:
            VB6ParseError: If ``Attribute VB_Name`` does not open the file.
        """
        return parse_source(file_name, contents, cls._parse_lines)

    @classmethod
    def _parse_lines(cls, file_name: str, lines: list[str]) -> "VB6ModuleFile":
        name, attributes, _ = parse_attributes(file_name, lines, 0)
        return cls(name=name, attributes=attributes)
