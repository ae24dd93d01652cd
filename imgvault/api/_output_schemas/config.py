"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    Output structure:
    - section: the section name, empty string if none provided (listing all sections)
    - content: if section is empty, dict with "sections" key; otherwise the section config dict
    - config_path: path to the configuration file
    """

    section: str = Field(..., description="Section name, empty string if none provided (listing all sections)")
    content: dict[str, Any] = Field(..., description="Section names or the section config dict")
    config_path: str = Field(..., description="Path to the configuration file")


register_output_schema("config", "show", ConfigShowOutput)
