"""Get imgvault home directory path or path under it."""

import os
from pathlib import Path

from ...constants import IMGVAULT_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get imgvault home directory path or path under it.

    Checks the IMGVAULT_HOME environment variable first, defaults to
    ~/.imgvault if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.imgvault")
        >>> get_home_dir("config.json")
        Path("/Users/user/.imgvault/config.json")
    """
    home_env = os.environ.get("IMGVAULT_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        home = Path(user_home) / IMGVAULT_HOME_EXT if user_home else Path.home() / IMGVAULT_HOME_EXT

    return home / Path(*parts) if parts else home
