"""Store public API."""

from collections.abc import Callable
from importlib import import_module
from typing import Any

from ..config.StoreConfig import StoreConfig
from ._AbstractStore import _AbstractStore


class Store(_AbstractStore):
    """Facade for document store operations.

    Delegates to a concrete backend selected by ``store_config.type``.
    Acts as a Context Manager to ensure proper resource handling.
    """

    def __init__(self, store_config: StoreConfig):
        self.store_config = store_config
        self.type = store_config.type
        self._impl: _AbstractStore | None = None

    def __enter__(self) -> "Store":
        from ..config.StoreConfig import _BACKEND_REGISTRY

        backend_type = self.store_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Pattern: imgvault.api.store._<type>._Backend
        module = import_module(f"{_BACKEND_REGISTRY[backend_type]}._Backend")
        self._impl = module._Backend(self.store_config)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self._impl = None

    @property
    def impl(self) -> _AbstractStore:
        if self._impl is None:
            raise RuntimeError("Store not initialized (use 'with Store(...)')")
        return self._impl

    @property
    def attachment_dir(self) -> str:
        return self.impl.attachment_dir

    async def read(self, path: str) -> str:
        return await self.impl.read(path)

    async def write(self, path: str, text: str) -> None:
        await self.impl.write(path, text)

    async def read_binary(self, path: str) -> bytes:
        return await self.impl.read_binary(path)

    async def write_binary(self, path: str, data: bytes) -> None:
        await self.impl.write_binary(path, data)

    async def delete(self, path: str) -> None:
        await self.impl.delete(path)

    async def trash(self, path: str) -> None:
        await self.impl.trash(path)

    async def rename(self, path: str, new_path: str) -> None:
        await self.impl.rename(path, new_path)

    async def exists(self, path: str) -> bool:
        return await self.impl.exists(path)

    async def list_files(self, predicate: Callable[[str], bool] | None = None) -> list[str]:
        return await self.impl.list_files(predicate)

    async def resolve_shorthand(self, text: str, context_path: str) -> str | None:
        return await self.impl.resolve_shorthand(text, context_path)

    async def get_frontmatter(self, path: str) -> dict[str, Any] | None:
        return await self.impl.get_frontmatter(path)

    async def available_attachment_path(self, suggested_name: str, source_path: str = "") -> str:
        return await self.impl.available_attachment_path(suggested_name, source_path)

    async def resolved_links(self) -> dict[str, dict[str, int]]:
        return await self.impl.resolved_links()
