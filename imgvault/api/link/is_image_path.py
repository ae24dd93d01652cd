"""Image file detection by extension."""

from pathlib import PurePosixPath

from .is_remote_url import is_remote_url

IMAGE_EXTENSIONS = frozenset({"jpeg", "jpg", "png", "gif", "svg", "bmp", "webp", "avif"})


def file_extension(path: str) -> str:
    """Lowercase extension of ``path`` without the dot (empty if none)."""
    return PurePosixPath(path.strip()).suffix.lstrip(".").lower()


def is_image_path(path: str) -> bool:
    """Return True for a local (non-URL) path with an image extension."""
    if not path.strip() or is_remote_url(path):
        return False
    return file_extension(path) in IMAGE_EXTENSIONS
