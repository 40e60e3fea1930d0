"""Per-run check configuration."""

from dataclasses import dataclass, replace
from pathlib import Path

from .ReferenceKind import ReferenceKind


@dataclass(frozen=True)
class CheckSettings:
    """Target path plus one toggle per reference category.

    Immutable; each project checked during a bulk run gets its own copy via
    for_project().
    """

    project_path: Path
    check_forms: bool = True
    check_modules: bool = True
    check_classes: bool = True
    check_references: bool = True

    def for_project(self, project_path: Path) -> "CheckSettings":
        """Copy of these settings aimed at another project file."""
        return replace(self, project_path=project_path)

    def is_enabled(self, kind: ReferenceKind) -> bool:
        return {
            ReferenceKind.SUB_PROJECT: self.check_references,
            ReferenceKind.CLASS: self.check_classes,
            ReferenceKind.MODULE: self.check_modules,
            ReferenceKind.FORM: self.check_forms,
        }[kind]
