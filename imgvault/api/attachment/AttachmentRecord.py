"""A non-document file in the store."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AttachmentRecord:
    path: str
    extension: str  # lowercase, without dot
