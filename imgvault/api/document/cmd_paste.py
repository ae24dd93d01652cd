"""Store an image file as an attachment of a document."""

import asyncio
from collections.abc import Iterator
from pathlib import Path

from ..codec.CodecError import CodecError
from ..codec.ImageCodec import ImageCodec
from ..config.ImgVaultConfig import ImgVaultConfig
from ..StageResult import StageResult
from ..store.Store import Store
from . import DocumentPasteOutput
from .store_pasted_image import store_pasted_image


def cmd_paste(path: str, image_file: str, alt_text: str = "") -> StageResult:
    """Convert ``image_file`` and store it as an attachment of ``path``.

    The rendered link is returned for insertion; the document is not modified.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = ImgVaultConfig.load()
            data = Path(image_file).expanduser().read_bytes()

            async def run() -> tuple[str, str]:
                with Store(config.store) as store:
                    return await store_pasted_image(store, path, data, ImageCodec(), config, alt_text=alt_text)

            yield (0.4, "Converting and storing image...")
            attachment_path, link = asyncio.run(run())
        except (CodecError, OSError, ValueError) as e:
            result_obj.output = DocumentPasteOutput(
                errors=[str(e)], warnings=[], path=path, attachment_path="", link="", success=False
            ).model_dump(mode="python")
            result_obj.result = f"Paste failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = DocumentPasteOutput(
            errors=[], warnings=[], path=path, attachment_path=attachment_path, link=link, success=True
        ).model_dump(mode="python")
        result_obj.result = f"Stored {attachment_path}"
        result_obj.success = True

    return StageResult(announce=f"Pasting {image_file} into {path}...", progress_callback=do_work)
