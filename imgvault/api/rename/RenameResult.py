"""Outcome of a rename event."""

from dataclasses import dataclass, field

from .RenameState import RenameState


@dataclass
class RenameResult:
    """Attachments renamed for one document rename, plus per-item failures."""

    old_path: str
    new_path: str
    state: RenameState = RenameState.IDLE
    renamed: dict[str, str] = field(default_factory=dict)
    failures: dict[str, str] = field(default_factory=dict)
    error: str = ""

    @property
    def renamed_count(self) -> int:
        return len(self.renamed)

    @property
    def failed_count(self) -> int:
        return len(self.failures)

    def summary(self) -> str:
        if self.state is RenameState.FAILED:
            return f"Rename of {self.new_path} failed: {self.error}"
        if not self.renamed and not self.failures:
            return "No attachments to rename"
        return f"Renamed attachments: succeeded {self.renamed_count} / failed {self.failed_count}"
