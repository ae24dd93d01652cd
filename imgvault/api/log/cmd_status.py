"""Log status command."""

from collections.abc import Iterator

from ..config.ImgVaultConfig import ImgVaultConfig
from ..config.LogConfig import LogConfig
from ..StageResult import StageResult
from . import LogStatusOutput
from .read_log_entries import read_log_entries


def cmd_status() -> StageResult:
    """Summarize retained warnings and errors in the unified logfile.

    Expired entries are pruned as the file is read. Without a config file the
    default retention periods apply.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        log_path = ImgVaultConfig.get_logfile_path()
        yield (0.2, "Loading configuration...")
        try:
            log_config = ImgVaultConfig.load().log
        except ValueError:
            log_config = LogConfig()

        yield (0.5, "Reading log entries...")
        try:
            warnings, errors = read_log_entries(log_path, log_config)
        except OSError as e:
            result_obj.output = LogStatusOutput(
                errors=[f"Cannot read logfile: {e}"],
                warnings=[],
                log_path=str(log_path),
                warning_count=0,
                error_count=0,
                success=False,
            ).model_dump(mode="python")
            result_obj.result = f"Log status failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = LogStatusOutput(
            errors=errors,
            warnings=warnings,
            log_path=str(log_path),
            warning_count=len(warnings),
            error_count=len(errors),
            success=True,
        ).model_dump(mode="python")
        result_obj.result = f"Log has {len(warnings)} warning(s) and {len(errors)} error(s)"
        result_obj.success = True

    return StageResult(announce="Checking log status...", progress_callback=do_work)
