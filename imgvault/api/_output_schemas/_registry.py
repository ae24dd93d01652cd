"""Lookup table from ``(domain, command)`` to output schema."""

from pydantic import BaseModel

_SCHEMAS: dict[tuple[str, str], type[BaseModel]] = {}


def register_output_schema(domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
    """Declare ``schema_class`` as the output of ``imgvault.api.<domain>.cmd_<command_name>``."""
    key = (domain, command_name)
    existing = _SCHEMAS.get(key)
    if existing is not None and existing is not schema_class:
        raise ValueError(f"{domain}.{command_name} already has output schema {existing.__name__}")
    _SCHEMAS[key] = schema_class


def get_output_schema(domain: str, command_name: str) -> type[BaseModel] | None:
    return _SCHEMAS.get((domain, command_name))
