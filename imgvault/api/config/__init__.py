"""Configuration domain."""

from .._output_schemas.config import ConfigShowOutput
from .CleanupConfig import CleanupConfig
from .ConvertConfig import ConvertConfig
from .FetchConfig import FetchConfig
from .get_home_dir import get_home_dir
from .ImgVaultConfig import ImgVaultConfig
from .LinkConfig import LinkConfig
from .LogConfig import LogConfig
from .RefererMapping import RefererMapping
from .RenameConfig import RenameConfig
from .StoreConfig import StoreConfig

__all__ = [
    "CleanupConfig",
    "ConfigShowOutput",
    "ConvertConfig",
    "FetchConfig",
    "ImgVaultConfig",
    "LinkConfig",
    "LogConfig",
    "RefererMapping",
    "RenameConfig",
    "StoreConfig",
    "get_home_dir",
]
