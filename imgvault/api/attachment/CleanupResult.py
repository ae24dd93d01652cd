from dataclasses import dataclass, field


@dataclass
class CleanupResult:
    """Paths removed, kept because excluded, and failed with a reason."""

    deleted: list[str] = field(default_factory=list)
    excluded: list[str] = field(default_factory=list)
    failures: dict[str, str] = field(default_factory=dict)
