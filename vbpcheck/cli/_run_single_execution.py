"""Run command once and display result using 4-stage pattern."""

from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

from rich.markup import escape

from ..api.validate_output import validate_output

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
) -> None:
    """Run command once and display result.

    Commands handle their own failures and report them through their output
    schema, so this never exits with a failure status.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] Progress: {escape(message)} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Validation failure is a programming error - fail loudly
    result.output = validate_output(func, result.output)

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    if result_printer is not None and display_format == "text":
        result_printer(result.output)
    else:
        display.json_output(result.output, format=display_format)
