"""Output schemas for attachment commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class AttachmentUnusedOutput(BaseOutputSchema):
    """Output schema for attachment unused command."""

    kind: str = Field(..., description="Attachment kind that was scanned: image or all")
    attachments_total: int = Field(..., description="Number of attachments enumerated")
    unused: list[str] = Field(..., description="Store paths of attachments no document references")
    count: int = Field(..., description="Number of unused attachments")
    success: bool = Field(..., description="Whether the scan completed")


class AttachmentCleanOutput(BaseOutputSchema):
    """Output schema for attachment clean command."""

    kind: str = Field(..., description="Attachment kind that was scanned: image or all")
    delete_option: str = Field(..., description="How files were removed: trash or permanent")
    deleted: list[str] = Field(..., description="Store paths that were removed")
    excluded: list[str] = Field(..., description="Unused store paths kept because they sit in an excluded folder")
    success: bool = Field(..., description="Whether cleanup completed")


register_output_schema("attachment", "unused", AttachmentUnusedOutput)
register_output_schema("attachment", "clean", AttachmentCleanOutput)
