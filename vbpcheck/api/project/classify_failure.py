"""Classify a parse failure reported by the VB6 layer."""

from ..vb6.VB6ErrorKind import VB6ErrorKind
from ..vb6.VB6ParseError import VB6ParseError
from .FailureClass import FailureClass


def classify_failure(error: VB6ParseError) -> FailureClass:
    """Encoding anomaly when the parser flagged a likely non-English character set, else a generic failure."""
    if error.kind is VB6ErrorKind.LIKELY_NON_ENGLISH_CHARACTER_SET:
        return FailureClass.ENCODING_ANOMALY
    return FailureClass.GENERIC_PARSE_FAILURE
