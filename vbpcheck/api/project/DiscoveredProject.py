"""One outcome of project discovery."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DiscoveredProject:
    """A candidate project file, or the traversal error met at ``path``."""

    path: Path
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None
