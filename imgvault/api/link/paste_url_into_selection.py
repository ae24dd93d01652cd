"""Turn a pasted URL and the selected text into a link."""

import re
from collections.abc import Sequence
from urllib.parse import urlparse

# Fallback for URLs without a scheme, e.g. "example.com/page"
FALLBACK_URL_PATTERN = re.compile(
    r"[-a-zA-Z0-9@:%._\+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b([-a-zA-Z0-9()@:%_\+.~#?&//=]*)"
)


def _is_url(text: str) -> bool:
    parsed = urlparse(text)
    if parsed.scheme and parsed.netloc:
        return True
    return FALLBACK_URL_PATTERN.fullmatch(text) is not None


def paste_url_into_selection(selection: str, clipboard: str, embed_patterns: Sequence[str] = ()) -> str | None:
    """Build the link that replaces ``selection`` when ``clipboard`` is pasted.

    Returns ``[selection](url)``, or ``![selection](url)`` when the URL matches
    one of ``embed_patterns`` (regular expressions). Returns None when nothing
    is selected or the clipboard does not hold a single URL, leaving the
    default paste behaviour in place.
    """
    url = clipboard.strip()
    if not selection.strip() or not url or any(ch.isspace() for ch in url) or not _is_url(url):
        return None

    embed = any(re.search(pattern, url) for pattern in embed_patterns if pattern.strip())
    prefix = "!" if embed else ""
    return f"{prefix}[{selection}]({url})"
