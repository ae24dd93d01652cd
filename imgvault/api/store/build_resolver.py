"""Snapshot the store into a PathResolver."""

from ._AbstractStore import _AbstractStore
from .PathResolver import PathResolver


async def build_resolver(store: _AbstractStore) -> PathResolver:
    """Create a PathResolver over the store's current file list."""
    return PathResolver(await store.list_files(), store.attachment_dir)
