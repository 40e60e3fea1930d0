"""Outcome of checking one project descriptor."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CheckResult:
    """Failures found in one project, grouped into three exclusive categories.

    The lists only grow while the project is being checked and are not
    touched once the result has been returned.
    """

    project_path: str
    parsing_errors: list[str] = field(default_factory=list)
    non_english_files: list[str] = field(default_factory=list)
    missing_files: list[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not (self.parsing_errors or self.non_english_files or self.missing_files)

    @classmethod
    def parse_failure(cls, project_path: str, message: str) -> "CheckResult":
        """Result for a project that could not be read or parsed at all."""
        return cls(project_path=project_path, parsing_errors=[message])

    @classmethod
    def load_failure(cls, project_path: str, error: str) -> "CheckResult":
        """Result for a project that discovery could not reach."""
        return cls(project_path=project_path, missing_files=[f"Failed to load {error}"])

    def to_dict(self) -> dict[str, Any]:
        return {
            "project_path": self.project_path,
            "parsing_errors": list(self.parsing_errors),
            "non_english_files": list(self.non_english_files),
            "missing_files": list(self.missing_files),
        }
