"""Output schemas of the ``cmd_*`` commands, keyed by (domain, command)."""

from collections.abc import Callable

from pydantic import BaseModel


class SchemaRegistry:
    def __init__(self) -> None:
        self._schemas: dict[tuple[str, str], type[BaseModel]] = {}

    def register_output_schema(self, domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
        key = (domain, command_name)
        if key in self._schemas:
            raise ValueError(f"Schema already registered for {domain}.{command_name}")
        self._schemas[key] = schema_class

    def get_output_schema(self, domain: str, command_name: str) -> type[BaseModel] | None:
        return self._schemas.get((domain, command_name))

    @staticmethod
    def command_key(func: Callable) -> tuple[str, str]:
        """``vbpcheck.api.project.cmd_check`` -> ``("project", "check")``."""
        parts = func.__module__.split(".")
        domain = parts[-2] if len(parts) > 1 else ""
        return domain, func.__name__.removeprefix("cmd_")


schema_registry = SchemaRegistry()
