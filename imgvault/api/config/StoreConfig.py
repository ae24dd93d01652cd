"""Document store configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StoreConfig(BaseModel):
    """Where the vault lives and which parts of it are attachments."""

    model_config = ConfigDict(extra="forbid")

    type: str = Field("filesystem", description="Store backend type")
    base_dir: str = Field(..., description="Path to vault root directory")
    attachment_dir: str = Field(
        "attachments", description="Default attachment folder relative to base_dir ('./' prefix: next to the document)"
    )
    excluded_folders: list[str] = Field(default_factory=list, description="Folders never cleaned")
    exclude_subfolders: bool = Field(False, description="Whether excluded_folders also cover descendants")
    excluded_extensions: list[str] = Field(default_factory=list, description="Extensions never treated as attachments")

    @field_validator("base_dir")
    @classmethod
    def _normalize_base_dir(cls, v: str) -> str:
        from imgvault.utils.expand_path import expand_path

        return str(expand_path(v))

    @field_validator("attachment_dir")
    @classmethod
    def _strip_attachment_dir(cls, v: str) -> str:
        v = v.strip()
        if v.startswith("./"):
            return "./" + v[2:].strip("/")
        return v.strip("/")

    @field_validator("excluded_folders")
    @classmethod
    def _strip_folders(cls, v: list[str]) -> list[str]:
        return [folder.strip().strip("/") for folder in v if folder.strip()]

    @field_validator("excluded_extensions")
    @classmethod
    def _normalize_extensions(cls, v: list[str]) -> list[str]:
        return [ext.strip().lstrip(".").lower() for ext in v if ext.strip()]


_BACKEND_REGISTRY = {
    "filesystem": "imgvault.api.store._filesystem",
}
