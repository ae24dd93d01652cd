"""A link found in a text snapshot."""

from dataclasses import dataclass

from .LinkKind import LinkKind


@dataclass(frozen=True)
class Span:
    """Half-open character range ``[start, end)`` in the scanned text."""

    start: int
    end: int


@dataclass(frozen=True)
class LinkOccurrence:
    """One discovered image link.

    Spans are only meaningful against the exact text the occurrence was
    extracted from. ``raw_target`` is the text between the syntax delimiters,
    before any percent-decoding. ``wrapper_target`` is the outer hyperlink of a
    link-wrapped composite and empty for every other kind.
    """

    kind: LinkKind
    raw_target: str
    alt_text: str = ""
    span: Span | None = None
    wrapper_target: str = ""

    @property
    def is_remote(self) -> bool:
        from .is_remote_url import is_remote_url

        return is_remote_url(self.raw_target)
