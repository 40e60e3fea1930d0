"""A named ``Class=`` or ``Module=`` entry of a VB6 project file."""

from dataclasses import dataclass

from .VB6ErrorKind import VB6ErrorKind
from .VB6ParseError import VB6ParseError


@dataclass(frozen=True)
class VB6ProjectMember:
    name: str
    path: str

    @classmethod
    def parse(cls, file_name: str, value: str, line_number: int) -> "VB6ProjectMember":
        """Parse ``Name; path``."""
        name, sep, path = value.partition(";")
        if not sep or not name.strip() or not path.strip():
            raise VB6ParseError(file_name, VB6ErrorKind.NAME_PATH_MALFORMED, line_number, value)
        return cls(name=name.strip(), path=path.strip())
