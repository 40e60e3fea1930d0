"""Read and parse one project descriptor."""

from pathlib import Path

from ...utils.get_logger import get_logger
from ..vb6.VB6ParseError import VB6ParseError
from ..vb6.VB6Parser import VB6Parser
from .CheckResult import CheckResult
from .LoadedProject import LoadedProject

logger = get_logger("project.load")


def load_project(project_path: Path, parser: VB6Parser | None = None) -> LoadedProject | CheckResult:
    """Load a project descriptor.

    Returns:
        LoadedProject on success. When the file cannot be read or parsed, a
        CheckResult holding that single parse error; nothing else about the
        project is checked in that case.
    """
    parser = parser or VB6Parser()

    try:
        contents = project_path.read_bytes()
    except (OSError, ValueError) as exc:
        logger.warning("Cannot read project %s: %s", project_path, exc)
        return CheckResult.parse_failure(str(project_path), f"Failed to read {project_path}: {exc}")

    try:
        project = parser.parse_project(project_path.name, contents)
    except VB6ParseError as exc:
        logger.warning("Cannot parse project %s: %s", project_path, exc)
        return CheckResult.parse_failure(str(project_path), str(exc))

    return LoadedProject.from_project(project_path, project)
