"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

import pytest

from imgvault.api.store.Store import Store

# Re-export commonly used helpers from root conftest
from tests.conftest import minimal_config_dict, run_cmd, write_config

__all__ = [
    "minimal_config_dict",
    "run_cmd",
    "write_config",
]


@pytest.fixture
def store(imgvault_config):
    """Filesystem store over the test vault."""
    with Store(imgvault_config.store) as opened:
        yield opened
