"""VB6 file-format layer: parsers for project, class, module and form files."""

from .VB6ClassFile import VB6ClassFile
from .VB6ErrorKind import VB6ErrorKind
from .VB6FormFile import VB6FormFile
from .VB6ModuleFile import VB6ModuleFile
from .VB6ParseError import VB6ParseError
from .VB6Parser import VB6Parser
from .VB6Project import VB6Project
from .VB6ProjectMember import VB6ProjectMember
from .VB6ProjectReference import VB6ProjectReference

__all__ = [
    "VB6ClassFile",
    "VB6ErrorKind",
    "VB6FormFile",
    "VB6ModuleFile",
    "VB6ParseError",
    "VB6Parser",
    "VB6Project",
    "VB6ProjectMember",
    "VB6ProjectReference",
]
