"""Output schemas for rename commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RenameOutput(BaseOutputSchema):
    """Output schema for the rename command."""

    old_path: str = Field(..., description="Document path before the rename")
    new_path: str = Field(..., description="Document path after the rename")
    state: str = Field(..., description="Terminal state of the rename flow: done or failed")
    renamed: dict[str, str] = Field(..., description="Mapping from old attachment path to new attachment path")
    renamed_count: int = Field(..., description="Number of attachments renamed")
    failed_count: int = Field(..., description="Number of attachments whose rename failed")
    success: bool = Field(..., description="Whether the rename flow reached the done state")


register_output_schema("rename", "rename", RenameOutput)
