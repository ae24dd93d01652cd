"""Result of resolving a raw link target."""

from dataclasses import dataclass

from .TargetKind import TargetKind


@dataclass(frozen=True)
class ResolvedTarget:
    """A raw target and the store path it names.

    ``canonical_path`` is None for remote targets and for local targets that
    could not be resolved.
    """

    raw_target: str
    canonical_path: str | None
    kind: TargetKind

    @property
    def resolved(self) -> bool:
        return self.canonical_path is not None
