"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution
from .constants import DEFAULT_DISPLAY_FORMAT, DISPLAY_FORMATS
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Get the display format stored by the app callback on ``ctx`` or one of its parents.

    Falls back to the default when no context sets one.
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in DISPLAY_FORMATS:
            return obj["display_format"]
        current = current.parent
    return DEFAULT_DISPLAY_FORMAT


def _handle_stage_result(
    func: F,
    ctx: typer.Context | None = None,
    result_printer: Callable[[dict], None] | None = None,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (STDERR)
    2. Progress (STDERR)
    3. Result (STDERR)
    4. Output (STDOUT): ``result_printer`` for the text format, otherwise JSON/YAML

    Args:
        func: Function that returns StageResult
        ctx: Context of the running Typer command, carries the display format
        result_printer: Renders the validated output dict as text
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format(ctx), result_printer)

    return wrapper  # type: ignore[return-value]
