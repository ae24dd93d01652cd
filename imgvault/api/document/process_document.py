"""Download, convert and relink every remote image in a document."""

import asyncio
import logging
from collections.abc import Callable
from pathlib import PurePosixPath

from ..codec.CodecError import CodecError
from ..codec.ImageCodec import PASSTHROUGH_EXTENSIONS, ImageCodec, format_for_extension
from ..config.ImgVaultConfig import ImgVaultConfig
from ..fetch.discover_referer import discover_referer
from ..fetch.Fetcher import Fetcher
from ..fetch.FetchError import FetchError
from ..fetch.select_referer import select_referer
from ..link.extract_from_text import extract_from_text
from ..link.rewrite_links import rewrite_links
from ..rename.NameGenerator import NameGenerator
from ..store._AbstractStore import _AbstractStore
from ..store.DocumentUnreadable import DocumentUnreadable
from .ProcessResult import ProcessResult

logger = logging.getLogger(__name__)


async def _store_image(
    store: _AbstractStore,
    document_path: str,
    url: str,
    referer: str | None,
    fetcher: Fetcher,
    codec: ImageCodec,
    config: ImgVaultConfig,
    name: str,
    result: ProcessResult,
) -> str:
    """Fetch ``url`` into the store and return the path the link should point at."""
    fetched = await fetcher.fetch(url, referer)
    extension = fetched.extension.lstrip(".").lower()
    download_path = await store.available_attachment_path(f"{name}.{extension}", document_path)
    await store.write_binary(download_path, fetched.data)

    if extension in PASSTHROUGH_EXTENSIONS:
        return download_path

    convert = config.convert
    try:
        if format_for_extension(extension) == convert.format:
            data = await asyncio.to_thread(codec.compress, fetched.data, convert.quality, convert.color_depth)
            await store.write_binary(download_path, data)
            return download_path
        data = await asyncio.to_thread(codec.convert, fetched.data, convert.format, convert.quality, convert.color_depth)
    except CodecError as e:
        # The original download stays and the link points at it
        logger.warning("Keeping %s unconverted: %s", download_path, e)
        result.warnings.append(f"{url}: {e}")
        return download_path

    converted_path = await store.available_attachment_path(f"{name}.{convert.extension}", document_path)
    await store.write_binary(converted_path, data)
    await store.delete(download_path)
    return converted_path


async def process_document(
    store: _AbstractStore,
    path: str,
    fetcher: Fetcher,
    codec: ImageCodec,
    config: ImgVaultConfig,
    name_generator: Callable[[], str] | None = None,
    referer_override: str | None = None,
) -> ProcessResult:
    """Replace every remote image link in ``path`` with a link to a stored copy.

    Images are handled one at a time. A failed download is counted and its
    link left as it was; every stored image is relinked in a single write of
    the document at the end.

    Args:
        store: Document store holding ``path``.
        path: Store-relative document path.
        fetcher: Image downloader.
        codec: Image converter.
        config: Full configuration (link style, convert and fetch sections).
        name_generator: Source of file name disambiguators.
        referer_override: Referer to send for every URL instead of the
            configured or discovered one.

    Raises:
        DocumentUnreadable: If the document cannot be read.
    """
    name_generator = name_generator or NameGenerator()
    result = ProcessResult(path=path)
    try:
        text = await store.read(path)
        frontmatter = await store.get_frontmatter(path)
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentUnreadable(path, str(e)) from e

    occurrences = extract_from_text(text)
    remote = [occ for occ in occurrences if occ.is_remote]
    result.skipped_count = len(occurrences) - len(remote)
    if not remote:
        logger.info("No remote images in %s", path)
        return result

    discovered = discover_referer(frontmatter, text)
    document_base = PurePosixPath(path).stem
    for occ in remote:
        url = occ.raw_target
        referer = referer_override or select_referer(url, config.fetch.referers) or discovered or None
        try:
            stored = await _store_image(
                store, path, url, referer, fetcher, codec, config, f"{document_base}_{name_generator()}", result
            )
        except (FetchError, OSError) as e:
            logger.warning("Failed to store %s: %s", url, e)
            result.warnings.append(f"{url}: {e}")
            result.failed_count += 1
            continue
        result.rewrite_map[url] = stored
        result.processed_count += 1

    if result.rewrite_map:
        await store.write(path, rewrite_links(text, result.rewrite_map, config.link.style))

    logger.info("%s: %s", path, result.summary())
    return result
