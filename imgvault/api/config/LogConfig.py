"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LogConfig(BaseModel):
    """Log level and retention configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Logging level")
    debug_retention_days: float = Field(0.5, gt=0, description="Days to retain debug entries in log")
    info_retention_days: float = Field(1.0, gt=0, description="Days to retain info entries in log")
    warning_retention_days: float = Field(2.0, gt=0, description="Days to retain warnings in log")
    error_retention_days: float = Field(7.0, gt=0, description="Days to retain errors in log")
