"""Find project descriptors under a directory."""

import os
from pathlib import Path

from ...utils.get_logger import get_logger
from ._constants import PROJECT_EXTENSION
from .DiscoveredProject import DiscoveredProject

logger = get_logger("project.discover")


def discover_projects(root: Path, extension: str = PROJECT_EXTENSION) -> list[DiscoveredProject]:
    """Walk ``root`` recursively and collect files ending in ``extension``.

    The extension match is case-sensitive. Directories that cannot be listed
    and dangling ``extension`` links are kept as failed entries instead of
    stopping the walk. Sibling entries are visited in sorted order so the
    result is stable for a given tree.
    """
    discovered: list[DiscoveredProject] = []

    def _on_error(exc: OSError) -> None:
        logger.warning("Cannot traverse %s: %s", exc.filename, exc)
        failed_path = Path(exc.filename) if exc.filename else root
        discovered.append(DiscoveredProject(path=failed_path, error=str(exc)))

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames.sort()
        for name in sorted(filenames):
            if Path(name).suffix != extension:
                continue
            path = Path(dirpath) / name
            if not path.exists():
                logger.warning("Dangling link: %s", path)
                discovered.append(DiscoveredProject(path=path, error=f"{path}: dangling link"))
                continue
            discovered.append(DiscoveredProject(path=path))

    return discovered
