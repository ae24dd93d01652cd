"""List unused attachments."""

import asyncio
from collections.abc import Iterator

from ..config.ImgVaultConfig import ImgVaultConfig
from ..StageResult import StageResult
from ..store.Store import Store
from . import AttachmentUnusedOutput
from .AttachmentKind import AttachmentKind
from .list_attachments import list_attachments
from .ReachabilityAnalyzer import ReachabilityAnalyzer


def cmd_unused(kind: str = "image") -> StageResult:
    """Report attachments that no document references.

    Args:
        kind: ``image`` for image files only, ``all`` for every attachment.
    """

    def failed(result_obj: StageResult, message: str) -> None:
        result_obj.output = AttachmentUnusedOutput(
            errors=[message],
            warnings=[],
            kind=kind,
            attachments_total=0,
            unused=[],
            count=0,
            success=False,
        ).model_dump(mode="python")
        result_obj.result = f"Unused attachment scan failed: {message}"
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            attachment_kind = AttachmentKind(kind)
            config = ImgVaultConfig.load()
        except ValueError as e:
            failed(result_obj, str(e))
            return

        async def run() -> tuple[int, list[str], list[str]]:
            with Store(config.store) as store:
                analyzer = ReachabilityAnalyzer(store, config.store.excluded_extensions)
                total = len(await list_attachments(store, attachment_kind, config.store.excluded_extensions))
                unused = await analyzer.compute_unused(attachment_kind)
                return total, [record.path for record in unused], analyzer.warnings

        yield (0.3, "Scanning documents for references...")
        try:
            total, unused, warnings = asyncio.run(run())
        except (OSError, ValueError) as e:
            failed(result_obj, str(e))
            return

        yield (1.0, "Complete")
        result_obj.output = AttachmentUnusedOutput(
            errors=[],
            warnings=warnings,
            kind=attachment_kind.value,
            attachments_total=total,
            unused=unused,
            count=len(unused),
            success=True,
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(unused)} unused of {total} attachment(s)"
        result_obj.success = True

    return StageResult(announce=f"Finding unused {kind} attachments...", progress_callback=do_work)
