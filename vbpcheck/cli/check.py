"""Check command for the Typer app."""

import typer

from ..api.project.cmd_check import cmd_check
from ._handle_stage_result import _handle_stage_result
from ._print_check_report import _print_check_report


def check(
    ctx: typer.Context,
    path: str | None = typer.Argument(None, help="Project file or directory to search (default: current directory)"),
    skip_forms: bool = typer.Option(
        False, "--form", "--forms", "-f", help="Skip checking the forms listed in the project"
    ),
    skip_modules: bool = typer.Option(
        False, "--module", "--modules", "-m", help="Skip checking the modules listed in the project"
    ),
    skip_classes: bool = typer.Option(
        False, "--class", "--classes", "-c", help="Skip checking the classes listed in the project"
    ),
    skip_references: bool = typer.Option(
        False, "--reference", "--references", "-r", help="Skip checking the sub-project references listed in the project"
    ),
) -> None:
    """Check that every file a VB6 project refers to exists and parses."""
    _handle_stage_result(cmd_check, ctx, result_printer=_print_check_report)(
        path=path,
        check_forms=not skip_forms,
        check_modules=not skip_modules,
        check_classes=not skip_classes,
        check_references=not skip_references,
    )
