"""Result of a command: announce, run with progress, then report."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands to the CLI.

    ``announce`` is shown before any work starts. ``progress_callback`` is a
    generator that does the work, yields ``(fraction, message)`` tuples and
    ends by calling :meth:`finish`.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict[str, Any] = field(default_factory=dict)
    success: bool = False

    def finish(self, message: str, output: dict[str, Any], success: bool) -> None:
        """Record the one-line result message and the structured output."""
        self.result = message
        self.output = output
        self.success = success
