"""Fields every command output carries."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Common part of all command outputs.

    Outputs are closed: a command that emits a key its schema does not
    declare fails validation.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Messages for failures that stopped or spoiled the command")
    warnings: list[str] = Field(default_factory=list, description="Messages for per-item problems the command worked around")
