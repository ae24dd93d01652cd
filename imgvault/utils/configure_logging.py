import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {"DEBUG": logging.DEBUG, "INFO": logging.INFO, "WARN": logging.WARNING, "ERROR": logging.ERROR}


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure the ``imgvault`` logger to write a rotating file under the home directory.

    Modules log through ``logging.getLogger(__name__)``; nothing is written
    until an entry point calls this.

    Args:
        home: Path to the imgvault home directory. If None, derived from environment.
        level: ``DEBUG``, ``INFO``, ``WARN`` or ``ERROR``.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        from imgvault.api.config.get_home_dir import get_home_dir

        home = get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "imgvault.log"

    root_logger = logging.getLogger("imgvault")
    root_logger.setLevel(_LEVELS.get(level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
