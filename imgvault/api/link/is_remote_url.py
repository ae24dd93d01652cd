"""Remote URL detection."""

REMOTE_SCHEMES = ("http://", "https://")


def is_remote_url(target: str) -> bool:
    """Return True when ``target`` starts with an http(s) scheme."""
    return target.strip().lower().startswith(REMOTE_SCHEMES)
