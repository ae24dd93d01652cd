"""Per-syntax link matching."""

import re

from ._patterns import BRACKET_EMBED_PATTERN, LINK_WRAPPED_PATTERN, MARKDOWN_IMAGE_PATTERN
from .LinkKind import LinkKind
from .LinkOccurrence import LinkOccurrence, Span

_PATTERNS: dict[LinkKind, re.Pattern[str]] = {
    LinkKind.BRACKET_EMBED: BRACKET_EMBED_PATTERN,
    LinkKind.MARKDOWN_IMAGE: MARKDOWN_IMAGE_PATTERN,
    LinkKind.LINK_WRAPPED: LINK_WRAPPED_PATTERN,
}


def occurrence_from_match(kind: LinkKind, match: re.Match[str]) -> LinkOccurrence:
    """Build a LinkOccurrence from a match of the pattern for ``kind``."""
    groups = match.groupdict()
    return LinkOccurrence(
        kind=kind,
        raw_target=groups["target"],
        alt_text=groups.get("alt") or "",
        span=Span(match.start(), match.end()),
        wrapper_target=groups.get("href") or "",
    )


def match_links(text: str, kind: LinkKind) -> list[LinkOccurrence]:
    """Return every match of one syntax kind, in text order.

    No precedence is applied here: the inner image of a link-wrapped composite
    is also reported when matching ``MARKDOWN_IMAGE``.
    """
    pattern = _PATTERNS.get(kind)
    if pattern is None:
        raise ValueError(f"No text pattern for link kind: {kind}")
    return [occurrence_from_match(kind, match) for match in pattern.finditer(text)]
