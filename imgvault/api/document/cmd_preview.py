"""Preview a link rewrite without saving it."""

import asyncio
import json
from collections.abc import Iterator
from pathlib import Path

from ..config.ImgVaultConfig import ImgVaultConfig
from ..link.LinkStyle import LinkStyle
from ..link.rewrite_links import rewrite_links
from ..StageResult import StageResult
from ..store.Store import Store
from . import DocumentPreviewOutput


def _load_rewrite_map(map_file: str) -> dict[str, str]:
    try:
        raw = json.loads(Path(map_file).expanduser().read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in rewrite map {map_file}: {e}") from e
    if not isinstance(raw, dict) or not all(isinstance(k, str) and isinstance(v, str) for k, v in raw.items()):
        raise ValueError(f"Rewrite map {map_file} must be an object of string to string")
    return raw


def cmd_preview(path: str, map_file: str, style: str | None = None) -> StageResult:
    """Show ``path`` as it would read after rewriting with the map in ``map_file``.

    Args:
        path: Store-relative path of the document.
        map_file: JSON file holding ``{old target: new path}``.
        style: Link style to render; defaults to ``link.style``.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = ImgVaultConfig.load()
            target_style = LinkStyle(style) if style else config.link.style
            rewrite_map = _load_rewrite_map(map_file)

            async def read() -> str:
                with Store(config.store) as store:
                    return await store.read(path)

            yield (0.4, "Reading document...")
            text = asyncio.run(read())
        except (OSError, UnicodeDecodeError, ValueError) as e:
            result_obj.output = DocumentPreviewOutput(
                errors=[str(e)], warnings=[], path=path, style=style or "", content="", changed=False, success=False
            ).model_dump(mode="python")
            result_obj.result = f"Preview failed: {e}"
            result_obj.success = False
            return

        yield (0.8, "Rewriting links...")
        content = rewrite_links(text, rewrite_map, target_style)

        yield (1.0, "Complete")
        changed = content != text
        result_obj.output = DocumentPreviewOutput(
            errors=[],
            warnings=[],
            path=path,
            style=target_style.value,
            content=content,
            changed=changed,
            success=True,
        ).model_dump(mode="python")
        result_obj.result = "Preview differs from the stored document" if changed else "Preview is unchanged"
        result_obj.success = True

    return StageResult(announce=f"Previewing link rewrite for {path}...", progress_callback=do_work)
