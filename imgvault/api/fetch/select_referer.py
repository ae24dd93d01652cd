"""Referer table lookup."""

from collections.abc import Sequence

from ..config.RefererMapping import RefererMapping


def select_referer(url: str, mappings: Sequence[RefererMapping]) -> str | None:
    """Return the referer of the first mapping whose pattern occurs in ``url``."""
    for mapping in mappings:
        if mapping.url_pattern in url:
            return mapping.referer
    return None
