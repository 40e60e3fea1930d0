"""Validate command output against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from . import _output_schemas  # noqa: F401  (registers schemas)
from .schema_registry import schema_registry


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate a command's output dict and return it with defaults filled in.

    Raises:
        ValueError: If no schema is registered for ``func`` or the output does
            not match it. Both are programming errors.
    """
    domain, command_name = schema_registry.command_key(func)
    schema_class = schema_registry.get_output_schema(domain, command_name)
    if schema_class is None:
        raise ValueError(f"No output schema registered for {domain}.{command_name}")

    try:
        return schema_class.model_validate(output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"Output validation failed for {domain}.{command_name}: {e}") from e
