"""Decode raw VB6 file bytes."""

from ._constants import SOURCE_ENCODING
from .VB6ErrorKind import VB6ErrorKind
from .VB6ParseError import VB6ParseError


def decode_source(file_name: str, contents: bytes) -> str:
    """Decode VB6 file contents as Windows-1252.

    VB6 saves sources in the ANSI code page of the machine that wrote them,
    so bytes that are undefined in Windows-1252 point at a foreign code page.

    Raises:
        VB6ParseError: EMPTY_FILE for empty input, LIKELY_NON_ENGLISH_CHARACTER_SET
            when the bytes are not valid Windows-1252.
    """
    if not contents.strip():
        raise VB6ParseError(file_name, VB6ErrorKind.EMPTY_FILE)
    try:
        return contents.decode(SOURCE_ENCODING)
    except UnicodeDecodeError as exc:
        line = contents[: exc.start].count(b"\n") + 1
        raise VB6ParseError(
            file_name,
            VB6ErrorKind.LIKELY_NON_ENGLISH_CHARACTER_SET,
            line,
            f"byte 0x{contents[exc.start]:02X} is not Windows-1252",
        ) from exc
