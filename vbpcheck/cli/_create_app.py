"""Create the main Typer CLI app."""

import logging

import typer

from ..api.config.VbpcheckConfig import VbpcheckConfig
from ..utils.configure_logging import configure_logging
from .check import check
from .constants import DEFAULT_DISPLAY_FORMAT, DISPLAY_FORMATS


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Check the structure of Visual Basic 6 projects",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.command(name="check")(check)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option(
            DEFAULT_DISPLAY_FORMAT, "--display", "-d", help="Output format: text, json or yaml"
        ),
        verbose: bool = typer.Option(False, "--verbose", help="Log debug details to STDERR"),
    ) -> None:
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display}'", err=True)
            raise typer.Exit(1)

        # Config errors are reported by the command itself
        try:
            log_config = VbpcheckConfig.load().log
            configure_logging(logging.DEBUG if verbose else log_config.level, log_config.file)
        except ValueError:
            configure_logging(logging.DEBUG if verbose else logging.WARNING)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
