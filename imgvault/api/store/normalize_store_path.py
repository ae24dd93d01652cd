"""Segment-stack normalization of store paths."""

from posixpath import dirname


def normalize_store_path(path: str, base_dir: str = "") -> str | None:
    """Join ``path`` onto ``base_dir`` and normalize ``.`` and ``..`` segments.

    Returns None when ``..`` climbs above the store root.
    """
    stack: list[str] = [part for part in base_dir.split("/") if part]
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if not stack:
                return None
            stack.pop()
            continue
        stack.append(segment)
    return "/".join(stack)


def parent_dir(path: str) -> str:
    """Containing directory of a store path ('' for the root)."""
    return dirname(path)
