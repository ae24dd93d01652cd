from datetime import datetime, timezone
from pathlib import Path

_LEVEL_ALIASES = {"WARNING": "WARN", "CRITICAL": "ERROR"}


def append_log(log_path: Path, domain: str, level: str, message: str) -> None:
    """Append one ``[timestamp] [domain] LEVEL: message`` line to the activity logfile.

    ``level`` accepts the standard ``logging`` names too. Multi-line messages
    are folded onto one line. Write failures are ignored.
    """
    level = level.upper()
    level = _LEVEL_ALIASES.get(level, level)
    message = " | ".join(line.strip() for line in message.splitlines() if line.strip())
    timestamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(f"[{timestamp}] [{domain}] {level}: {message}\n")
    except OSError:
        pass
