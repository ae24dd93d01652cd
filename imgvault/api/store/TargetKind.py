"""Where a link target lives."""

from enum import Enum


class TargetKind(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"
