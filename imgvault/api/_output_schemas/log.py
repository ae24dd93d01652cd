"""Output schemas for log commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LogStatusOutput(BaseOutputSchema):
    """Output schema for log status command."""

    log_path: str = Field(..., description="Path to the unified logfile")
    warning_count: int = Field(..., description="Number of retained warning entries")
    error_count: int = Field(..., description="Number of retained error entries")
    success: bool = Field(..., description="Whether the logfile could be read")


register_output_schema("log", "status", LogStatusOutput)
