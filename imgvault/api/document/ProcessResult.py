"""Outcome of processing one document."""

from dataclasses import dataclass, field


@dataclass
class ProcessResult:
    path: str
    processed_count: int = 0
    failed_count: int = 0
    skipped_count: int = 0
    rewrite_map: dict[str, str] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    @property
    def nothing_to_do(self) -> bool:
        """True when the document had no remote image to process."""
        return self.processed_count == 0 and self.failed_count == 0

    def summary(self) -> str:
        if self.nothing_to_do:
            return f"No remote images in {self.path}, nothing to do"
        return f"Stored images: succeeded {self.processed_count} / failed {self.failed_count}"
