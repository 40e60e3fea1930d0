"""Category totals across a set of check results."""

from collections.abc import Sequence
from dataclasses import dataclass

from .CheckResult import CheckResult
from .SummaryCase import SummaryCase


@dataclass(frozen=True)
class AggregateSummary:
    project_count: int
    parsing_errors: int
    non_english_files: int
    missing_files: int

    @property
    def case(self) -> SummaryCase:
        return SummaryCase.from_counts(self.parsing_errors, self.non_english_files, self.missing_files)

    @classmethod
    def from_results(cls, results: Sequence[CheckResult]) -> "AggregateSummary":
        return cls(
            project_count=len(results),
            parsing_errors=sum(len(result.parsing_errors) for result in results),
            non_english_files=sum(len(result.non_english_files) for result in results),
            missing_files=sum(len(result.missing_files) for result in results),
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "parsing_errors": self.parsing_errors,
            "non_english_files": self.non_english_files,
            "missing_files": self.missing_files,
        }
