"""Check a command's output dict against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from . import _output_schemas  # noqa: F401  (registers schemas)
from ._output_schemas import get_output_schema


def _command_key(func: Callable) -> tuple[str, str] | None:
    """``(domain, command)`` for ``imgvault.api.<domain>.cmd_<command>``, else None."""
    parts = func.__module__.split(".")
    if parts[:2] != ["imgvault", "api"] or len(parts) < 3:
        return None
    if not func.__name__.startswith("cmd_"):
        return None
    return parts[2], func.__name__.removeprefix("cmd_")


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Return ``output`` validated (and default-filled) by the schema of ``func``.

    Functions outside the command API, or commands without a registered
    schema, pass through unchanged.

    Raises:
        ValueError: If the output does not match the schema.
    """
    key = _command_key(func)
    schema_class = get_output_schema(*key) if key else None
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except ValidationError as e:
        domain, command = key
        raise ValueError(f"Output validation failed for {domain}.{command} ({schema_class.__name__}): {e}") from e
