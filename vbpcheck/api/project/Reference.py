"""A descriptor-relative pointer to another file."""

from dataclasses import dataclass

from .ReferenceKind import ReferenceKind


@dataclass(frozen=True)
class Reference:
    kind: ReferenceKind
    path: str  # verbatim from the descriptor; may use backslashes
