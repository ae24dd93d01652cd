"""Process a document's remote images."""

import asyncio
from collections.abc import Iterator

from ..codec.ImageCodec import ImageCodec
from ..config.ImgVaultConfig import ImgVaultConfig
from ..fetch.Fetcher import Fetcher
from ..log.append_log import append_log
from ..StageResult import StageResult
from ..store.DocumentUnreadable import DocumentUnreadable
from ..store.Store import Store
from . import DocumentProcessOutput
from .process_document import process_document
from .ProcessResult import ProcessResult


def cmd_process(path: str, referer: str | None = None) -> StageResult:
    """Download every remote image in a document and relink it locally.

    Args:
        path: Store-relative path of the document.
        referer: Referer header to send instead of the configured or discovered one.
    """

    def failed(result_obj: StageResult, message: str) -> None:
        result_obj.output = DocumentProcessOutput(
            errors=[message],
            warnings=[],
            path=path,
            processed_count=0,
            failed_count=0,
            skipped_count=0,
            rewrite_map={},
            success=False,
        ).model_dump(mode="python")
        result_obj.result = f"Processing failed: {message}"
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = ImgVaultConfig.load()
        except ValueError as e:
            failed(result_obj, str(e))
            return

        async def run() -> ProcessResult:
            with Store(config.store) as store:
                async with Fetcher(config.fetch.timeout_secs, config.fetch.min_bytes) as fetcher:
                    return await process_document(
                        store, path, fetcher, ImageCodec(), config, referer_override=referer
                    )

        yield (0.2, "Fetching remote images...")
        log_path = ImgVaultConfig.get_logfile_path()
        try:
            process_result = asyncio.run(run())
        except (DocumentUnreadable, OSError, ValueError) as e:
            append_log(log_path, "document", "ERROR", str(e))
            failed(result_obj, str(e))
            return

        for warning in process_result.warnings:
            append_log(log_path, "document", "WARN", warning)
        append_log(log_path, "document", "INFO", f"{path}: {process_result.summary()}")

        yield (1.0, "Complete")
        result_obj.output = DocumentProcessOutput(
            errors=[],
            warnings=process_result.warnings,
            path=path,
            processed_count=process_result.processed_count,
            failed_count=process_result.failed_count,
            skipped_count=process_result.skipped_count,
            rewrite_map=process_result.rewrite_map,
            success=True,
        ).model_dump(mode="python")
        result_obj.result = process_result.summary()
        result_obj.success = True

    return StageResult(announce=f"Processing images in {path}...", progress_callback=do_work)
