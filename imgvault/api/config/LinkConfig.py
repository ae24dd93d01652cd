"""Link rendering configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ..link.LinkStyle import LinkStyle


class LinkConfig(BaseModel):
    """Which syntax rewritten image links are rendered in."""

    model_config = ConfigDict(extra="forbid")

    style: LinkStyle = Field(LinkStyle.BRACKET_EMBED, description="Rendered link style")
