"""Turn a selection and a pasted URL into a link."""

from collections.abc import Iterator

from ..link.paste_url_into_selection import paste_url_into_selection
from ..StageResult import StageResult
from . import DocumentPasteUrlOutput


def cmd_paste_url(selection: str, clipboard: str, embed_patterns: list[str] | None = None) -> StageResult:
    """Build the link that replaces ``selection`` when ``clipboard`` is pasted over it."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Building link...")
        link = paste_url_into_selection(selection, clipboard, embed_patterns or ())
        if link is None:
            error = "Nothing selected" if not selection.strip() else f"Not a single URL: {clipboard!r}"
            result_obj.output = DocumentPasteUrlOutput(
                errors=[error], warnings=[], selection=selection, link="", success=False
            ).model_dump(mode="python")
            result_obj.result = error
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = DocumentPasteUrlOutput(
            errors=[], warnings=[], selection=selection, link=link, success=True
        ).model_dump(mode="python")
        result_obj.result = link
        result_obj.success = True

    return StageResult(announce="Pasting URL over selection...", progress_callback=do_work)
