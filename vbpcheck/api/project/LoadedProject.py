"""A project descriptor that parsed successfully."""

from dataclasses import dataclass, field
from pathlib import Path

from ..vb6.VB6Project import VB6Project
from .Reference import Reference
from .ReferenceKind import ReferenceKind


@dataclass(frozen=True)
class LoadedProject:
    """Reference lists of a parsed descriptor and the directory they resolve against."""

    project_path: Path
    directory: Path
    references: dict[ReferenceKind, tuple[Reference, ...]] = field(default_factory=dict)

    def references_of(self, kind: ReferenceKind) -> tuple[Reference, ...]:
        return self.references.get(kind, ())

    @classmethod
    def from_project(cls, project_path: Path, project: VB6Project) -> "LoadedProject":
        """Extract references from a parsed descriptor.

        Compiled type-library references are not files of the project and are left out.
        """
        paths = {
            ReferenceKind.SUB_PROJECT: [reference.path for reference in project.sub_project_references],
            ReferenceKind.CLASS: [member.path for member in project.classes],
            ReferenceKind.MODULE: [member.path for member in project.modules],
            ReferenceKind.FORM: list(project.forms),
        }
        return cls(
            project_path=project_path,
            directory=project_path.parent,
            references={kind: tuple(Reference(kind, path) for path in kind_paths) for kind, kind_paths in paths.items()},
        )
