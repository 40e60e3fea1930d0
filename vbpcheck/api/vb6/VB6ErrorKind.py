"""Failure kinds reported by the VB6 file parsers."""

from enum import Enum


class VB6ErrorKind(Enum):
    """Why a VB6 file could not be parsed."""

    LIKELY_NON_ENGLISH_CHARACTER_SET = "likely non-English character set"
    EMPTY_FILE = "file is empty"
    NO_EQUAL_SPLIT = "expected 'key=value'"
    PROJECT_TYPE_MISSING = "project type not specified"
    PROJECT_TYPE_UNKNOWN = "unknown project type"
    REFERENCE_MALFORMED = "malformed reference"
    NAME_PATH_MALFORMED = "expected 'Name; path'"
    VERSION_HEADER_MISSING = "VERSION header missing"
    BLOCK_BEGIN_MISSING = "BEGIN block missing"
    CONTROL_HEADER_MALFORMED = "expected 'Begin <type> <name>'"
    UNTERMINATED_BLOCK = "block is missing its END"
    UNEXPECTED_END = "END without matching BEGIN"
    PROPERTY_MALFORMED = "expected 'Property = value'"
    ATTRIBUTE_NAME_MISSING = "Attribute VB_Name missing"
