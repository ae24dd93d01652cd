"""Attachment rename configuration."""

from pydantic import BaseModel, ConfigDict, Field


class RenameConfig(BaseModel):
    """Controls renaming of attachments when their document is renamed."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(True, description="Rename attachments when their document is renamed")
    settle_delay_secs: float = Field(0.3, ge=0, description="Delay before acting on a rename event")
