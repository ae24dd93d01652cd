"""imgvault utility functions, one per module."""

from .configure_logging import configure_logging
from .expand_path import expand_path

__all__ = [
    "configure_logging",
    "expand_path",
]
