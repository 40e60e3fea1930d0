"""A ``Reference=`` entry of a VB6 project file."""

from dataclasses import dataclass

from ._constants import COMPILED_REFERENCE_PREFIX, SUB_PROJECT_PREFIX
from .VB6ErrorKind import VB6ErrorKind
from .VB6ParseError import VB6ParseError


@dataclass(frozen=True)
class VB6ProjectReference:
    """Either a sub-project (``*\\A<path>``) or a compiled type library (``*\\G{uuid}#...``)."""

    path: str
    uuid: str = ""
    version: str = ""
    description: str = ""

    @property
    def is_sub_project(self) -> bool:
        return not self.uuid

    @classmethod
    def parse(cls, file_name: str, value: str, line_number: int) -> "VB6ProjectReference":
        if value.startswith(SUB_PROJECT_PREFIX):
            path = value[len(SUB_PROJECT_PREFIX) :].strip()
            if not path:
                raise VB6ParseError(file_name, VB6ErrorKind.REFERENCE_MALFORMED, line_number, value)
            return cls(path=path)

        if value.startswith(COMPILED_REFERENCE_PREFIX):
            parts = value[len(COMPILED_REFERENCE_PREFIX) :].split("#")
            if len(parts) < 4 or not parts[0].startswith("{"):
                raise VB6ParseError(file_name, VB6ErrorKind.REFERENCE_MALFORMED, line_number, value)
            uuid, version, _lcid, path = parts[:4]
            description = "#".join(parts[4:])
            return cls(path=path, uuid=uuid, version=version, description=description)

        raise VB6ParseError(file_name, VB6ErrorKind.REFERENCE_MALFORMED, line_number, value)
