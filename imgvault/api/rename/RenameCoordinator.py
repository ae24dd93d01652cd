"""Keep attachment names in step with their document's name."""

import asyncio
import logging
from collections.abc import Callable
from pathlib import PurePosixPath

from ..config.RenameConfig import RenameConfig
from ..link.extract_from_text import extract_from_text
from ..link.is_image_path import is_image_path
from ..link.LinkStyle import LinkStyle
from ..link.rewrite_links import rewrite_links
from ..store._AbstractStore import _AbstractStore
from ..store._constants import MARKDOWN_EXTENSION
from ..store.build_resolver import build_resolver
from .derive_attachment_name import derive_attachment_name
from .NameGenerator import NameGenerator
from .RenameFailure import RenameFailure
from .RenameResult import RenameResult
from .RenameState import RenameState

logger = logging.getLogger(__name__)


class RenameCoordinator:
    """Reacts to a document rename by renaming the images it embeds.

    Each event walks ``detected -> scanning -> renaming -> rewriting`` and
    ends in ``done``, or ``failed`` when the document cannot be read or
    written. Individual attachment renames are best effort.
    """

    def __init__(
        self,
        store: _AbstractStore,
        rename_config: RenameConfig | None = None,
        link_style: LinkStyle = LinkStyle.BRACKET_EMBED,
        name_generator: Callable[[], str] | None = None,
    ):
        self.store = store
        self.config = rename_config or RenameConfig()
        self.link_style = link_style
        self.name_generator = name_generator or NameGenerator()

    @staticmethod
    def _transition(result: RenameResult, state: RenameState) -> None:
        logger.debug("Rename %s -> %s: %s", result.old_path, result.new_path, state.value)
        result.state = state

    async def _rename(self, path: str, new_path: str) -> None:
        try:
            await self.store.rename(path, new_path)
        except FileExistsError as e:
            raise RenameFailure(path, new_path, "destination exists") from e
        except OSError as e:
            raise RenameFailure(path, new_path, str(e)) from e

    async def on_document_renamed(self, old_path: str, new_path: str) -> RenameResult:
        """Rename every local image referenced by ``new_path`` after the document.

        ``old_path`` is where the document lived before the host renamed it;
        the document itself must already be at ``new_path``.
        """
        result = RenameResult(old_path=old_path, new_path=new_path)
        old, new = PurePosixPath(old_path), PurePosixPath(new_path)
        if new.suffix.lstrip(".").lower() != MARKDOWN_EXTENSION or old.stem == new.stem:
            self._transition(result, RenameState.DONE)
            return result
        self._transition(result, RenameState.DETECTED)

        self._transition(result, RenameState.SCANNING)
        # Let the host finish its own rename bookkeeping first
        await asyncio.sleep(self.config.settle_delay_secs)
        try:
            text = await self.store.read(new_path)
            resolver = await build_resolver(self.store)
        except (OSError, UnicodeDecodeError) as e:
            self._transition(result, RenameState.FAILED)
            result.error = str(e)
            logger.error("Cannot read renamed document %s: %s", new_path, e)
            return result

        occurrences = [occ for occ in extract_from_text(text) if not occ.is_remote]

        self._transition(result, RenameState.RENAMING)
        rewrite_map: dict[str, str] = {}
        for occ in occurrences:
            target = resolver.resolve(occ.raw_target, new_path)
            current = target.canonical_path
            if current is None or not is_image_path(current):
                continue
            if current in result.renamed:
                rewrite_map[occ.raw_target] = result.renamed[current]
                continue
            if current in result.failures:
                continue

            destination = derive_attachment_name(current, new.stem, self.name_generator)
            if destination == current:
                continue
            try:
                await self._rename(current, destination)
            except RenameFailure as e:
                logger.warning("%s", e)
                result.failures[current] = e.reason
                continue
            logger.info("Renamed attachment %s -> %s", current, destination)
            result.renamed[current] = destination
            rewrite_map[occ.raw_target] = destination

        if rewrite_map:
            self._transition(result, RenameState.REWRITING)
            try:
                await self.store.write(new_path, rewrite_links(text, rewrite_map, self.link_style))
            except OSError as e:
                self._transition(result, RenameState.FAILED)
                result.error = str(e)
                logger.error("Cannot update links in %s: %s", new_path, e)
                return result

        self._transition(result, RenameState.DONE)
        return result
