"""Output schemas for every API command.

Importing this package registers all schemas with the registry.
"""

from . import attachment, config, document, log, rename
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = [
    "BaseOutputSchema",
    "attachment",
    "config",
    "document",
    "get_output_schema",
    "log",
    "register_output_schema",
    "rename",
]
