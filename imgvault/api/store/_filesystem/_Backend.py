"""Filesystem document store.

Implements _AbstractStore over a plain directory laid out the way an
Obsidian-style vault is: markdown documents, canvas files and attachments,
with dot-folders (``.obsidian``, ``.trash``) hidden from enumeration.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path, PurePosixPath
from posixpath import basename
from typing import Any

from ....utils.expand_path import expand_path
from ...config.StoreConfig import StoreConfig
from .._AbstractStore import _AbstractStore
from .._constants import MARKDOWN_EXTENSION, TRASH_DIR
from ..normalize_store_path import normalize_store_path, parent_dir
from ._frontmatter import parse_frontmatter
from ._MarkdownParser import parse_index_links


class _Backend(_AbstractStore):
    """Store backed by a directory on the local filesystem."""

    def __init__(self, store_config: StoreConfig):
        if not store_config.base_dir:
            raise ValueError("store.base_dir is required")

        self._base_dir = expand_path(store_config.base_dir)
        self._attachment_dir = store_config.attachment_dir

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    @property
    def attachment_dir(self) -> str:
        return self._attachment_dir

    def _abs(self, path: str) -> Path:
        normalized = normalize_store_path(path)
        if normalized is None or not normalized:
            raise ValueError(f"Invalid store path: {path!r}")
        return self._base_dir / normalized

    # Synchronous primitives, run in a worker thread by the async API

    def _list_files_sync(self) -> list[str]:
        files: list[str] = []
        for path in sorted(self._base_dir.rglob("*")):
            if not path.is_file():
                continue
            rel = path.relative_to(self._base_dir)
            if any(part.startswith(".") for part in rel.parts):
                continue
            files.append(rel.as_posix())
        return files

    def _write_binary_sync(self, path: str, data: bytes) -> None:
        target = self._abs(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)

    def _write_sync(self, path: str, text: str) -> None:
        target = self._abs(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")

    def _rename_sync(self, path: str, new_path: str) -> None:
        source = self._abs(path)
        target = self._abs(new_path)
        if not source.is_file():
            raise FileNotFoundError(f"No such file in store: {path}")
        if target.exists():
            raise FileExistsError(f"Destination already exists: {new_path}")
        target.parent.mkdir(parents=True, exist_ok=True)
        source.rename(target)

    def _trash_sync(self, path: str) -> None:
        source = self._abs(path)
        destination = self._base_dir / TRASH_DIR / path
        destination.parent.mkdir(parents=True, exist_ok=True)
        counter = 1
        while destination.exists():
            pure = PurePosixPath(path)
            destination = self._base_dir / TRASH_DIR / pure.parent / f"{pure.stem} {counter}{pure.suffix}"
            counter += 1
        source.rename(destination)

    def _resolved_links_sync(self) -> dict[str, dict[str, int]]:
        files = self._list_files_sync()
        index: dict[str, dict[str, int]] = {}
        for doc in files:
            if PurePosixPath(doc).suffix.lstrip(".") != MARKDOWN_EXTENSION:
                continue
            try:
                text = self._abs(doc).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                continue
            links: dict[str, int] = {}
            for link in parse_index_links(text):
                resolved = self._resolve_shorthand_sync(link.target, doc, files)
                if resolved is not None:
                    links[resolved] = links.get(resolved, 0) + 1
            index[doc] = links
        return index

    def _resolve_shorthand_sync(self, text: str, context_path: str, files: list[str] | None = None) -> str | None:
        link = text.split("|", 1)[0].split("#", 1)[0].strip()
        if not link or "://" in link:
            return None
        files = files if files is not None else self._list_files_sync()
        file_set = set(files)
        context_dir = parent_dir(context_path)

        names = [link] if PurePosixPath(link).suffix else [link, f"{link}.{MARKDOWN_EXTENSION}"]
        for name in names:
            for candidate in (normalize_store_path(name), normalize_store_path(name, context_dir)):
                if candidate and candidate in file_set:
                    return candidate

        # Shortest-unique-path form: match on trailing path components
        for name in names:
            matches = [f for f in files if f == name or f.endswith("/" + name)]
            if not matches:
                continue
            local = [f for f in matches if parent_dir(f) == context_dir]
            return local[0] if local else matches[0]
        return None

    def _available_attachment_path_sync(self, suggested_name: str, source_path: str) -> str:
        folder = self._attachment_dir
        if folder.startswith("./"):
            folder = normalize_store_path(folder, parent_dir(source_path)) or ""
        name = basename(suggested_name)
        candidate = normalize_store_path(name, folder) or name
        pure = PurePosixPath(candidate)
        counter = 1
        while (self._base_dir / candidate).exists():
            candidate = str(pure.with_name(f"{pure.stem} {counter}{pure.suffix}"))
            counter += 1
        return candidate

    # Async API

    async def read(self, path: str) -> str:
        return await asyncio.to_thread(self._abs(path).read_text, encoding="utf-8")

    async def write(self, path: str, text: str) -> None:
        await asyncio.to_thread(self._write_sync, path, text)

    async def read_binary(self, path: str) -> bytes:
        return await asyncio.to_thread(self._abs(path).read_bytes)

    async def write_binary(self, path: str, data: bytes) -> None:
        await asyncio.to_thread(self._write_binary_sync, path, data)

    async def delete(self, path: str) -> None:
        await asyncio.to_thread(self._abs(path).unlink)

    async def trash(self, path: str) -> None:
        await asyncio.to_thread(self._trash_sync, path)

    async def rename(self, path: str, new_path: str) -> None:
        await asyncio.to_thread(self._rename_sync, path, new_path)

    async def exists(self, path: str) -> bool:
        try:
            target = self._abs(path)
        except ValueError:
            return False
        return await asyncio.to_thread(target.is_file)

    async def list_files(self, predicate: Callable[[str], bool] | None = None) -> list[str]:
        files = await asyncio.to_thread(self._list_files_sync)
        return [f for f in files if predicate(f)] if predicate else files

    async def resolve_shorthand(self, text: str, context_path: str) -> str | None:
        return await asyncio.to_thread(self._resolve_shorthand_sync, text, context_path)

    async def get_frontmatter(self, path: str) -> dict[str, Any] | None:
        text = await self.read(path)
        return parse_frontmatter(text, path)

    async def available_attachment_path(self, suggested_name: str, source_path: str = "") -> str:
        return await asyncio.to_thread(self._available_attachment_path_sync, suggested_name, source_path)

    async def resolved_links(self) -> dict[str, dict[str, int]]:
        return await asyncio.to_thread(self._resolved_links_sync)
