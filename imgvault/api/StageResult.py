"""Result object shared by every ``cmd_*`` function."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class StageResult:
    """A command split into announce, progress, result and output stages.

    ``progress_callback`` is a generator taking this object; it yields
    ``(fraction, message)`` pairs and fills in ``result``, ``output`` and
    ``success`` before it finishes. Nothing runs until it is iterated.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict[str, Any] = field(default_factory=dict)
    success: bool = False

    def run(self) -> "StageResult":
        """Drive the progress generator to completion, discarding progress messages."""
        for _ in self.progress_callback(self):
            pass
        return self
