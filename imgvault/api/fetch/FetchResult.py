"""Downloaded image payload."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FetchResult:
    """Bytes of a fetched image and what the server said they are."""

    data: bytes
    content_type: str
    extension: str  # with leading dot, e.g. ".png"
