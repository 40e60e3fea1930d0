"""Exception raised by the VB6 file parsers."""

from .VB6ErrorKind import VB6ErrorKind


class VB6ParseError(Exception):
    """A VB6 file failed to parse.

    Attributes:
        file_name: Base name of the file being parsed
        kind: Failure kind, used by callers to triage the failure
        line: 1-based line number where parsing stopped, or None
        detail: Optional extra context
    """

    def __init__(self, file_name: str, kind: VB6ErrorKind, line: int | None = None, detail: str = ""):
        self.file_name = file_name
        self.kind = kind
        self.line = line
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        location = f"{self.file_name}:{self.line}" if self.line is not None else self.file_name
        message = f"{location}: {self.kind.value}"
        return f"{message} ({self.detail})" if self.detail else message
