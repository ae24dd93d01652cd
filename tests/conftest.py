"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from imgvault.api.config.ImgVaultConfig import ImgVaultConfig


def pytest_configure(config):
    for marker in ("unit", "integration", "smoke"):
        config.addinivalue_line("markers", f"{marker}: tests under tests/{marker}/")
    for domain in ("attachment", "cli", "codec", "config", "document", "fetch", "link", "log", "rename", "store"):
        config.addinivalue_line("markers", f"{domain}: {domain} domain tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(base_dir: str = "~/_vault") -> dict:
    """Minimal valid imgvault configuration dict for testing.

    Rename events act immediately so tests do not sleep.
    """
    return {
        "store": {
            "base_dir": base_dir,
            "attachment_dir": "attachments",
        },
        "rename": {
            "settle_delay_secs": 0,
        },
    }


def write_config(home: Path, config_dict: dict) -> Path:
    home.mkdir(parents=True, exist_ok=True)
    config_path = home / "config.json"
    config_path.write_text(json.dumps(config_dict, indent=2), encoding="utf-8")
    return config_path


def run_cmd(cmd_func, *args, **kwargs):
    """Call a cmd function and run its stages to completion."""
    return cmd_func(*args, **kwargs).run()


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Point IMGVAULT_HOME at a per-test directory so no test touches ~/.imgvault."""
    home = tmp_path / ".imgvault"
    monkeypatch.setenv("IMGVAULT_HOME", str(home))
    return home


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """Empty vault root directory."""
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture(vault_dir: Path) -> dict:
    """Minimal config dict whose store points at ``vault_dir``."""
    return minimal_config_dict(str(vault_dir))


@pytest.fixture
def imgvault_home(_isolated_home: Path, minimal_config_dict: dict) -> Path:
    """IMGVAULT_HOME with a minimal config file.

    Returns:
        Path to the imgvault home directory
    """
    write_config(_isolated_home, minimal_config_dict)
    return _isolated_home


@pytest.fixture
def imgvault_config(minimal_config_dict: dict) -> ImgVaultConfig:
    """ImgVaultConfig built from the minimal config dict."""
    return ImgVaultConfig(**minimal_config_dict)
