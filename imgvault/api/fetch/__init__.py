"""Fetch domain: downloading remote images."""

from .discover_referer import discover_referer
from .extension_for import CONTENT_TYPE_EXTENSIONS, extension_for
from .Fetcher import Fetcher
from .FetchError import FetchError
from .FetchResult import FetchResult
from .select_referer import select_referer

__all__ = [
    "CONTENT_TYPE_EXTENSIONS",
    "FetchError",
    "FetchResult",
    "Fetcher",
    "discover_referer",
    "extension_for",
    "select_referer",
]
