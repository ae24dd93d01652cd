"""Map a response content type to a file extension."""

from urllib.parse import urlparse

CONTENT_TYPE_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "image/svg+xml": ".svg",
    "image/tiff": ".tiff",
    "image/bmp": ".bmp",
    "image/x-icon": ".ico",
    "image/avif": ".avif",
    "image/heic": ".heic",
    "image/heif": ".heif",
}


def extension_for(content_type: str, url: str) -> str | None:
    """Pick the extension for an accepted response, or None to reject it.

    ``image/*`` types map through the table, falling back to the URL's own
    extension and then ``.jpg``. ``application/octet-stream`` is accepted only
    for URLs naming a ``.webp`` file.
    """
    content_type = content_type.split(";", 1)[0].strip().lower()
    if content_type in CONTENT_TYPE_EXTENSIONS:
        return CONTENT_TYPE_EXTENSIONS[content_type]

    if content_type.startswith("image/"):
        path = urlparse(url).path.lower()
        suffix = "." + path.rsplit(".", 1)[-1] if "." in path else ""
        if suffix in CONTENT_TYPE_EXTENSIONS.values():
            return suffix
        return ".jpg"

    if content_type == "application/octet-stream" and ".webp" in url.lower():
        return ".webp"
    return None
