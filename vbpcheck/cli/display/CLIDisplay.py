"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from ...utils.display.Display import Display


class CLIDisplay(Display):
    """Rich display: messages go to STDERR, structured output to STDOUT."""

    def __init__(self):
        self.console = Console(file=sys.stdout)
        self.stderr_console = Console(file=sys.stderr)

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime("%H:%M:%S")

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [blue]i[/blue] {escape(message)}")

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [green]✓[/green] {escape(message)}")

    def error(self, message: str, **kwargs) -> None:
        details = kwargs.get("details", "")
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [red]✗[/red] {escape(message)}")
        if details:
            self.stderr_console.print(f"  [dim]{escape(details)}[/dim]")

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(message)

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "yaml")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"

        if sys.stdout.isatty():
            self.console.print(Syntax(text, output_format, theme="monokai", line_numbers=False))
        else:
            sys.stdout.write(text)
