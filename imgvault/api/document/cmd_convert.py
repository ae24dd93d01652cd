"""Convert a document's image links to another style."""

import asyncio
from collections.abc import Iterator

from ..config.ImgVaultConfig import ImgVaultConfig
from ..link.convert_style import convert_style
from ..link.LinkStyle import LinkStyle
from ..StageResult import StageResult
from ..store.Store import Store
from . import DocumentConvertOutput


def cmd_convert(path: str, style: str | None = None) -> StageResult:
    """Rewrite local image links in ``path`` to ``style``.

    Args:
        path: Store-relative path of the document.
        style: ``bracket-embed`` or ``markdown``; defaults to ``link.style``.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = ImgVaultConfig.load()
            target_style = LinkStyle(style) if style else config.link.style
        except ValueError as e:
            result_obj.output = DocumentConvertOutput(
                errors=[str(e)], warnings=[], path=path, style=style or "", converted_count=0, success=False
            ).model_dump(mode="python")
            result_obj.result = f"Conversion failed: {e}"
            result_obj.success = False
            return

        async def run() -> int:
            with Store(config.store) as store:
                text = await store.read(path)
                converted, count = convert_style(text, target_style)
                if count:
                    await store.write(path, converted)
                return count

        yield (0.4, f"Converting links to {target_style.value}...")
        try:
            count = asyncio.run(run())
        except (OSError, UnicodeDecodeError, ValueError) as e:
            result_obj.output = DocumentConvertOutput(
                errors=[str(e)], warnings=[], path=path, style=target_style.value, converted_count=0, success=False
            ).model_dump(mode="python")
            result_obj.result = f"Conversion failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = DocumentConvertOutput(
            errors=[], warnings=[], path=path, style=target_style.value, converted_count=count, success=True
        ).model_dump(mode="python")
        result_obj.result = f"Converted {count} link(s) to {target_style.value}" if count else "No links to convert"
        result_obj.success = True

    return StageResult(announce=f"Converting image links in {path}...", progress_callback=do_work)
