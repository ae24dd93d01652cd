"""Find attachments that no document references."""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from ..link._patterns import BRACKET_EMBED_PATTERN
from ..link.encode_path import decode_path
from ..link.extract_from_node_graph import extract_from_node_graph
from ..link.extract_from_text import extract_from_text
from ..link.is_image_path import file_extension, is_image_path
from ..link.LinkOccurrence import LinkOccurrence
from ..link.ParseError import ParseError
from ..store._AbstractStore import _AbstractStore
from ..store._constants import DOCUMENT_EXTENSIONS, MARKDOWN_EXTENSION, NODE_GRAPH_EXTENSION
from ..store.normalize_store_path import normalize_store_path
from ..store.PathResolver import PathResolver
from .AttachmentKind import AttachmentKind
from .AttachmentRecord import AttachmentRecord
from .list_attachments import list_attachments

logger = logging.getLogger(__name__)


def _string_values(value: Any) -> Iterator[str]:
    if isinstance(value, str):
        yield value
    elif isinstance(value, list):
        for item in value:
            yield from _string_values(item)


class ReachabilityAnalyzer:
    """Computes the set of store paths referenced from any document.

    The set is rebuilt on every query from four sources: the store's resolved
    link index, front-matter values, links in markdown bodies and references
    in node-graph files. Documents that cannot be read or parsed are skipped
    and reported in ``warnings``.
    """

    def __init__(self, store: _AbstractStore, excluded_extensions: Iterable[str] = ()):
        self.store = store
        self.excluded_extensions = list(excluded_extensions)
        self.warnings: list[str] = []

    def _skip(self, path: str, reason: str) -> None:
        logger.warning("Skipping %s: %s", path, reason)
        self.warnings.append(f"{path}: {reason}")

    def _add_occurrences(
        self, occurrences: Iterable[LinkOccurrence], document: str, resolver: PathResolver, reachable: set[str]
    ) -> None:
        for occ in occurrences:
            if occ.is_remote:
                continue
            target = resolver.resolve(occ.raw_target, document)
            if target.canonical_path is not None:
                reachable.add(target.canonical_path)

    async def _add_frontmatter(self, document: str, reachable: set[str]) -> None:
        frontmatter = await self.store.get_frontmatter(document)
        for value in (frontmatter or {}).values():
            for text in _string_values(value):
                text = text.strip()
                embed = BRACKET_EMBED_PATTERN.search(text)
                if embed:
                    resolved = await self.store.resolve_shorthand(embed.group("target"), document)
                    if resolved:
                        reachable.add(resolved)
                elif is_image_path(text):
                    path = normalize_store_path(decode_path(text))
                    if path:
                        reachable.add(path)

    async def compute_reachable(self) -> set[str]:
        """Every store path some document links to."""
        self.warnings = []
        reachable: set[str] = set()
        files = await self.store.list_files()
        resolver = PathResolver(files, self.store.attachment_dir)

        index = await self.store.resolved_links()
        for targets in index.values():
            reachable.update(t for t in targets if file_extension(t) not in DOCUMENT_EXTENSIONS)

        for document in files:
            extension = file_extension(document)
            if extension not in (MARKDOWN_EXTENSION, NODE_GRAPH_EXTENSION):
                continue
            try:
                text = await self.store.read(document)
            except (OSError, UnicodeDecodeError) as e:
                self._skip(document, f"unreadable ({e})")
                continue

            if extension == MARKDOWN_EXTENSION:
                await self._add_frontmatter(document, reachable)
                self._add_occurrences(extract_from_text(text), document, resolver, reachable)
                continue

            try:
                occurrences = extract_from_node_graph(text, document)
            except ParseError as e:
                self._skip(document, str(e))
                continue
            self._add_occurrences(occurrences, document, resolver, reachable)

        return reachable

    async def compute_unused(self, kind: AttachmentKind | str = AttachmentKind.IMAGE) -> list[AttachmentRecord]:
        """Attachments of ``kind`` absent from the reachable set, in enumeration order."""
        attachments = await list_attachments(self.store, kind, self.excluded_extensions)
        reachable = await self.compute_reachable()
        unused = [record for record in attachments if record.path not in reachable]
        logger.info("%d of %d attachment(s) unused", len(unused), len(attachments))
        return unused
