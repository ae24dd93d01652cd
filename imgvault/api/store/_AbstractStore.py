"""Abstract base class for document stores."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class _AbstractStore(ABC):
    """Asynchronous interface to the host document store.

    Every path is a store-relative POSIX path.
    """

    @property
    @abstractmethod
    def attachment_dir(self) -> str:
        """Configured default attachment folder."""

    @abstractmethod
    async def read(self, path: str) -> str:
        """Read a document as text."""

    @abstractmethod
    async def write(self, path: str, text: str) -> None:
        """Replace a document's text."""

    @abstractmethod
    async def read_binary(self, path: str) -> bytes:
        """Read a file as bytes."""

    @abstractmethod
    async def write_binary(self, path: str, data: bytes) -> None:
        """Create or replace a binary file."""

    @abstractmethod
    async def delete(self, path: str) -> None:
        """Delete a file permanently."""

    @abstractmethod
    async def trash(self, path: str) -> None:
        """Move a file to the store's trash folder."""

    @abstractmethod
    async def rename(self, path: str, new_path: str) -> None:
        """Rename a file. Raises FileExistsError if ``new_path`` is taken."""

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Whether ``path`` names an existing file."""

    @abstractmethod
    async def list_files(self, predicate: Callable[[str], bool] | None = None) -> list[str]:
        """Enumerate files, optionally filtered by ``predicate``."""

    @abstractmethod
    async def resolve_shorthand(self, text: str, context_path: str) -> str | None:
        """Resolve a link shorthand as written in ``context_path`` to a file path."""

    @abstractmethod
    async def get_frontmatter(self, path: str) -> dict[str, Any] | None:
        """Parsed front-matter mapping of a document, or None."""

    @abstractmethod
    async def available_attachment_path(self, suggested_name: str, source_path: str = "") -> str:
        """A free path for a new attachment named ``suggested_name``."""

    @abstractmethod
    async def resolved_links(self) -> dict[str, dict[str, int]]:
        """Precomputed index: document path -> {resolved target path: link count}."""
