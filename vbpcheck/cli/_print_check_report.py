"""Text rendering of the project check output."""

import typer

from ..api.project.CheckResult import CheckResult
from ..api.project.render_detail import render_detail


def _print_check_report(output: dict) -> None:
    """Print per-project details followed by the summary line to STDOUT."""
    for project in output["projects"]:
        for line in render_detail(CheckResult(**project)):
            typer.echo(line)
    typer.echo(output["summary"])
