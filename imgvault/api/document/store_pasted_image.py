"""Store pasted image bytes as an attachment."""

import asyncio
from collections.abc import Callable
from pathlib import PurePosixPath

from ..codec.ImageCodec import ImageCodec
from ..config.ImgVaultConfig import ImgVaultConfig
from ..link.render_link import render_link
from ..rename.NameGenerator import NameGenerator
from ..store._AbstractStore import _AbstractStore


async def store_pasted_image(
    store: _AbstractStore,
    document_path: str,
    data: bytes,
    codec: ImageCodec,
    config: ImgVaultConfig,
    name_generator: Callable[[], str] | None = None,
    alt_text: str = "",
) -> tuple[str, str]:
    """Convert ``data`` to the configured format and store it next to ``document_path``.

    Returns:
        The attachment path and the link to insert, with ``alt_text`` (the
        editor selection) as alt text.

    Raises:
        CodecError: If the bytes are not a decodable image.
    """
    name_generator = name_generator or NameGenerator()
    convert = config.convert
    converted = await asyncio.to_thread(codec.convert, data, convert.format, convert.quality, convert.color_depth)
    name = f"{PurePosixPath(document_path).stem}_{name_generator()}.{convert.extension}"
    attachment_path = await store.available_attachment_path(name, document_path)
    await store.write_binary(attachment_path, converted)
    return attachment_path, render_link(attachment_path, alt_text, config.link.style)
