"""Network fetch configuration."""

from pydantic import BaseModel, ConfigDict, Field

from .RefererMapping import RefererMapping


class FetchConfig(BaseModel):
    """Timeouts, payload limits and referer table for image downloads."""

    model_config = ConfigDict(extra="forbid")

    timeout_secs: float = Field(30.0, gt=0, description="Per-request timeout in seconds")
    min_bytes: int = Field(1024, ge=0, description="Smallest accepted payload (SVG is exempt)")
    referers: list[RefererMapping] = Field(default_factory=list, description="Ordered referer table, first match wins")
