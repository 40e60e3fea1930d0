"""Entry points of the VB6 file-format layer."""

from .VB6ClassFile import VB6ClassFile
from .VB6FormFile import VB6FormFile
from .VB6ModuleFile import VB6ModuleFile
from .VB6Project import VB6Project


class VB6Parser:
    """Bundle of the four VB6 parsers.

    Every method takes the file's base name and raw bytes and raises
    VB6ParseError on failure. Instances hold no state and may be shared
    between threads.
    """

    def parse_project(self, file_name: str, contents: bytes) -> VB6Project:
        return VB6Project.parse(file_name, contents)

    def parse_class(self, file_name: str, contents: bytes) -> VB6ClassFile:
        return VB6ClassFile.parse(file_name, contents)

    def parse_module(self, file_name: str, contents: bytes) -> VB6ModuleFile:
        return VB6ModuleFile.parse(file_name, contents)

    def parse_form(self, file_name: str, contents: bytes) -> VB6FormFile:
        return VB6FormFile.parse(file_name, contents)
