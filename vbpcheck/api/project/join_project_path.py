"""Resolve a descriptor-relative reference against the project directory."""

from pathlib import Path

from .PathPolicy import PathPolicy


def join_project_path(project_directory: Path, reference: str, policy: PathPolicy | None = None) -> Path:
    """Join ``reference`` onto ``project_directory``.

    Pure path algebra: nothing is checked on disk.

    Args:
        project_directory: Directory holding the project descriptor
        reference: Path exactly as written in the descriptor
        policy: Separator policy, defaults to the host's
    """
    policy = policy or PathPolicy.native()
    return project_directory / policy.normalize(reference)
