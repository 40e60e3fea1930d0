"""The eight combinations of non-zero failure categories."""

from enum import Enum


class SummaryCase(Enum):
    """Keyed by (parsing errors > 0, non-English files > 0, missing files > 0)."""

    CLEAN = (False, False, False)
    MISSING = (False, False, True)
    NON_ENGLISH = (False, True, False)
    MISSING_NON_ENGLISH = (False, True, True)
    ERRORS = (True, False, False)
    MISSING_ERRORS = (True, False, True)
    ERRORS_NON_ENGLISH = (True, True, False)
    MISSING_ERRORS_NON_ENGLISH = (True, True, True)

    @classmethod
    def from_counts(cls, parsing_errors: int, non_english_files: int, missing_files: int) -> "SummaryCase":
        return cls((parsing_errors > 0, non_english_files > 0, missing_files > 0))
