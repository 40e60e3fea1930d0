"""Shared decode-then-parse driver for VB6 files."""

from collections.abc import Callable
from typing import TypeVar

from .decode_source import decode_source
from .VB6ErrorKind import VB6ErrorKind
from .VB6ParseError import VB6ParseError

T = TypeVar("T")


def parse_source(file_name: str, contents: bytes, parse_text: Callable[[str, list[str]], T]) -> T:
    """Decode ``contents`` and hand its lines to ``parse_text``.

    A structural failure in a file that carries non-ASCII bytes is reported as
    LIKELY_NON_ENGLISH_CHARACTER_SET: keywords written in a foreign code page
    are the usual reason such a file does not parse. The check looks at the
    whole file, so an English file that is broken for another reason and
    carries an accented letter or a copyright sign in a comment is
    reported as non-English too.
    """
    text = decode_source(file_name, contents)
    try:
        return parse_text(file_name, text.splitlines())
    except VB6ParseError as exc:
        if exc.kind is VB6ErrorKind.EMPTY_FILE or not any(byte >= 0x80 for byte in contents):
            raise
        raise VB6ParseError(
            file_name,
            VB6ErrorKind.LIKELY_NON_ENGLISH_CHARACTER_SET,
            exc.line,
            exc.kind.value,
        ) from exc
