"""Guess a referer for a document's images."""

import re
from collections.abc import Mapping
from typing import Any

from ..link.is_remote_url import is_remote_url

_URL_PATTERN = re.compile(r"https?://[^\s)\]>\"']+")

# Only the start of the body is searched for a source URL
BODY_SCAN_CHARS = 200


def discover_referer(frontmatter: Mapping[str, Any] | None, text: str) -> str:
    """Find the page a clipped document came from.

    A front-matter string value that is a URL wins; when several are present
    the last one in key order is used. Otherwise the first URL within the
    first 200 characters of ``text`` is returned, else an empty string.
    """
    referer = ""
    for value in (frontmatter or {}).values():
        if isinstance(value, str) and is_remote_url(value):
            referer = value.strip()
    if referer:
        return referer

    match = _URL_PATTERN.search(text[:BODY_SCAN_CHARS])
    return match.group(0) if match else ""
