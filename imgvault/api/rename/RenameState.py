from enum import Enum


class RenameState(str, Enum):
    """Progress of one document rename event."""

    IDLE = "idle"
    DETECTED = "detected"
    SCANNING = "scanning"
    RENAMING = "renaming"
    REWRITING = "rewriting"
    DONE = "done"
    FAILED = "failed"
