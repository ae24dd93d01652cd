"""Unused attachment cleanup configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CleanupConfig(BaseModel):
    """How unused attachments are removed."""

    model_config = ConfigDict(extra="forbid")

    delete_option: Literal["trash", "permanent"] = Field(
        "trash", description="Move to the vault .trash folder or delete permanently"
    )
