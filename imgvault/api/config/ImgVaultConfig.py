"""Top-level imgvault configuration."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from .CleanupConfig import CleanupConfig
from .ConvertConfig import ConvertConfig
from .FetchConfig import FetchConfig
from .get_home_dir import get_home_dir
from .LinkConfig import LinkConfig
from .LogConfig import LogConfig
from .RenameConfig import RenameConfig
from .StoreConfig import StoreConfig

_SECTIONS = ("store", "link", "convert", "fetch", "rename", "cleanup", "log")


def _describe(error: ValidationError) -> str:
    """First validation problem as ``section.field: message``."""
    first = error.errors()[0] if error.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", str(error))
    return f"{location}: {message}" if location else message


class ImgVaultConfig(BaseModel):
    """All imgvault settings, read from ``$IMGVAULT_HOME/config.json``.

    Only ``store`` must be present in the file; every other section falls
    back to its defaults.
    """

    model_config = ConfigDict(extra="forbid")

    store: StoreConfig
    link: LinkConfig = Field(default_factory=LinkConfig)
    convert: ConvertConfig = Field(default_factory=ConvertConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    rename: RenameConfig = Field(default_factory=RenameConfig)
    cleanup: CleanupConfig = Field(default_factory=CleanupConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @computed_field
    def path(self) -> Path:
        return self.get_config_path()

    @classmethod
    def get_config_path(cls) -> Path:
        return get_home_dir("config.json")

    @classmethod
    def get_logfile_path(cls) -> Path:
        """The unified activity logfile written by ``append_log``."""
        return get_home_dir("logfile")

    @classmethod
    def load(cls) -> "ImgVaultConfig":
        """Read and validate the config file.

        Raises:
            ValueError: If the file is missing, is not JSON, or fails validation.
        """
        path = cls.get_config_path()
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ValueError(f"Configuration file not found at {path}") from e
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: {path} must hold a JSON object")
        try:
            return cls(**raw)
        except ValidationError as e:
            raise ValueError(f"Configuration validation error: {_describe(e)}") from e

    def to_dict(self) -> dict[str, Any]:
        """Sections as JSON-compatible dicts, in file order."""
        return {name: getattr(self, name).model_dump(mode="json") for name in _SECTIONS}

    def save(self) -> None:
        """Write the config file, replacing it atomically.

        Raises:
            RuntimeError: If the file cannot be written.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(prefix=".config.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            os.replace(temp_name, path)
        except OSError as e:
            Path(temp_name).unlink(missing_ok=True)
            raise RuntimeError(f"Failed to save config: {e}") from e
