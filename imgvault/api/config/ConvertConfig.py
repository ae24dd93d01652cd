"""Image conversion configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ConvertConfig(BaseModel):
    """Target format and quality for stored images."""

    model_config = ConfigDict(extra="forbid")

    format: Literal["JPEG", "PNG"] = Field("JPEG", description="Output format for stored images")
    quality: float = Field(0.8, ge=0.1, le=1.0, description="JPEG quality between 0.1 and 1.0")
    color_depth: float = Field(1.0, gt=0.0, le=1.0, description="PNG color depth factor (1.0 keeps full color)")

    @property
    def extension(self) -> str:
        """File extension (without dot) matching the target format."""
        return "jpg" if self.format == "JPEG" else "png"
