"""Rename a document and its attachments."""

import asyncio
from collections.abc import Iterator

from ..config.ImgVaultConfig import ImgVaultConfig
from ..log.append_log import append_log
from ..StageResult import StageResult
from ..store.Store import Store
from . import RenameOutput
from .RenameCoordinator import RenameCoordinator
from .RenameResult import RenameResult
from .RenameState import RenameState


def cmd_rename(old_path: str, new_path: str) -> StageResult:
    """Rename ``old_path`` to ``new_path`` in the store, then rename its images.

    Args:
        old_path: Store-relative path of the document.
        new_path: Store-relative destination path.
    """

    def failed(result_obj: StageResult, message: str) -> None:
        result_obj.output = RenameOutput(
            errors=[message],
            warnings=[],
            old_path=old_path,
            new_path=new_path,
            state=RenameState.FAILED.value,
            renamed={},
            renamed_count=0,
            failed_count=0,
            success=False,
        ).model_dump(mode="python")
        result_obj.result = f"Rename failed: {message}"
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = ImgVaultConfig.load()
        except ValueError as e:
            failed(result_obj, str(e))
            return

        async def run() -> RenameResult:
            with Store(config.store) as store:
                await store.rename(old_path, new_path)
                if not config.rename.enabled:
                    return RenameResult(old_path=old_path, new_path=new_path, state=RenameState.DONE)
                coordinator = RenameCoordinator(store, config.rename, config.link.style)
                return await coordinator.on_document_renamed(old_path, new_path)

        yield (0.3, "Renaming document and attachments...")
        try:
            rename_result = asyncio.run(run())
        except (OSError, ValueError) as e:
            failed(result_obj, str(e))
            return

        log_path = ImgVaultConfig.get_logfile_path()
        warnings = [f"{path}: {reason}" for path, reason in rename_result.failures.items()]
        for warning in warnings:
            append_log(log_path, "rename", "WARN", warning)
        errors = [rename_result.error] if rename_result.error else []
        if errors:
            append_log(log_path, "rename", "ERROR", rename_result.summary())

        yield (1.0, "Complete")
        success = rename_result.state is RenameState.DONE
        result_obj.output = RenameOutput(
            errors=errors,
            warnings=warnings,
            old_path=old_path,
            new_path=new_path,
            state=rename_result.state.value,
            renamed=rename_result.renamed,
            renamed_count=rename_result.renamed_count,
            failed_count=rename_result.failed_count,
            success=success,
        ).model_dump(mode="python")
        result_obj.result = rename_result.summary()
        result_obj.success = success

    return StageResult(announce=f"Renaming {old_path} to {new_path}...", progress_callback=do_work)
