"""Referer header mapping for hot-link protected hosts."""

from pydantic import BaseModel, ConfigDict, Field


class RefererMapping(BaseModel):
    """Send ``referer`` when fetching a URL that contains ``url_pattern``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    url_pattern: str = Field(..., min_length=1, description="Substring matched against the image URL")
    referer: str = Field(..., description="Referer header value to send")
