"""Remove unused attachments."""

import asyncio
from collections.abc import Iterator

from ..config.ImgVaultConfig import ImgVaultConfig
from ..log.append_log import append_log
from ..StageResult import StageResult
from ..store.Store import Store
from . import AttachmentCleanOutput
from .AttachmentKind import AttachmentKind
from .CleanupResult import CleanupResult
from .delete_unused import delete_unused
from .ReachabilityAnalyzer import ReachabilityAnalyzer


def cmd_clean(kind: str = "image") -> StageResult:
    """Delete unused attachments using the configured delete option.

    Attachments inside ``store.excluded_folders`` are reported but kept.
    """

    def failed(result_obj: StageResult, message: str, delete_option: str = "") -> None:
        result_obj.output = AttachmentCleanOutput(
            errors=[message],
            warnings=[],
            kind=kind,
            delete_option=delete_option,
            deleted=[],
            excluded=[],
            success=False,
        ).model_dump(mode="python")
        result_obj.result = f"Attachment cleanup failed: {message}"
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            attachment_kind = AttachmentKind(kind)
            config = ImgVaultConfig.load()
        except ValueError as e:
            failed(result_obj, str(e))
            return
        delete_option = config.cleanup.delete_option

        async def run() -> tuple[CleanupResult, list[str]]:
            with Store(config.store) as store:
                analyzer = ReachabilityAnalyzer(store, config.store.excluded_extensions)
                unused = await analyzer.compute_unused(attachment_kind)
                cleanup = await delete_unused(
                    store,
                    unused,
                    delete_option,
                    config.store.excluded_folders,
                    config.store.exclude_subfolders,
                )
                return cleanup, analyzer.warnings

        yield (0.3, "Finding and removing unused attachments...")
        try:
            cleanup, warnings = asyncio.run(run())
        except (OSError, ValueError) as e:
            failed(result_obj, str(e), delete_option)
            return

        log_path = ImgVaultConfig.get_logfile_path()
        errors = [f"{path}: {reason}" for path, reason in cleanup.failures.items()]
        for error in errors:
            append_log(log_path, "attachment", "ERROR", f"Cannot remove {error}")
        if cleanup.deleted:
            append_log(
                log_path, "attachment", "INFO", f"Removed {len(cleanup.deleted)} unused attachment(s) ({delete_option})"
            )

        yield (1.0, "Complete")
        result_obj.output = AttachmentCleanOutput(
            errors=errors,
            warnings=warnings,
            kind=attachment_kind.value,
            delete_option=delete_option,
            deleted=cleanup.deleted,
            excluded=cleanup.excluded,
            success=not errors,
        ).model_dump(mode="python")
        if not cleanup.deleted and not cleanup.excluded and not errors:
            result_obj.result = "No unused attachments, nothing to do"
        else:
            result_obj.result = f"Removed attachments: succeeded {len(cleanup.deleted)} / failed {len(errors)}"
        result_obj.success = not errors

    return StageResult(announce=f"Cleaning unused {kind} attachments...", progress_callback=do_work)
