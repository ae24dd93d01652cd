"""Space encoding for markdown-image link targets.

Bracket embeds carry spaces literally; markdown-image targets that point at
store paths carry them percent-encoded.
"""

from urllib.parse import unquote

from .is_remote_url import is_remote_url


def encode_path(path: str) -> str:
    """Encode spaces in a store path for use inside ``![alt](...)``.

    URLs are returned unchanged.
    """
    if is_remote_url(path):
        return path
    return path.replace(" ", "%20")


def decode_path(path: str) -> str:
    """Decode a markdown-image target back to a literal store path.

    URLs are returned unchanged.
    """
    if is_remote_url(path):
        return path
    return unquote(path)
