from datetime import datetime, timedelta, timezone
from pathlib import Path

from ..config.LogConfig import LogConfig
from .LOG_PATTERN import LOG_PATTERN


def _retention(log_config: LogConfig) -> dict[str, timedelta]:
    return {
        "DEBUG": timedelta(days=log_config.debug_retention_days),
        "INFO": timedelta(days=log_config.info_retention_days),
        "WARN": timedelta(days=log_config.warning_retention_days),
        "ERROR": timedelta(days=log_config.error_retention_days),
    }


def _is_expired(timestamp: str, max_age: timedelta, now: datetime) -> bool:
    try:
        entry_time = datetime.fromisoformat(timestamp)
    except ValueError:
        return False
    if entry_time.tzinfo is None:
        entry_time = entry_time.replace(tzinfo=timezone.utc)
    return now - entry_time > max_age


def read_log_entries(log_path: Path, log_config: LogConfig) -> tuple[list[str], list[str]]:
    """Return the retained ``(warnings, errors)`` lines of the activity logfile.

    Reading prunes the file: expired entries and lines that are not log
    entries are dropped and the rest written back.
    """
    if not log_path.exists():
        return [], []

    retention = _retention(log_config)
    now = datetime.now(timezone.utc)
    kept: list[str] = []
    by_level: dict[str, list[str]] = {"WARN": [], "ERROR": []}
    for line in log_path.read_text(encoding="utf-8", errors="ignore").splitlines():
        match = LOG_PATTERN.match(line.strip())
        if match is None:
            continue
        level = match.group("level").upper()
        if _is_expired(match.group("timestamp"), retention[level], now):
            continue
        kept.append(match.group(0))
        if level in by_level:
            by_level[level].append(match.group(0))

    log_path.write_text("".join(f"{line}\n" for line in kept), encoding="utf-8")
    return by_level["WARN"], by_level["ERROR"]
