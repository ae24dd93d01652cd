from collections.abc import Iterable

from ..store.normalize_store_path import parent_dir


def is_in_excluded_folder(path: str, excluded_folders: Iterable[str], exclude_subfolders: bool = False) -> bool:
    """Whether ``path`` sits directly in (or, with ``exclude_subfolders``, below) an excluded folder."""
    folder = parent_dir(path)
    for excluded in excluded_folders:
        excluded = excluded.strip("/")
        if folder == excluded:
            return True
        if exclude_subfolders and folder.startswith(excluded + "/"):
            return True
    return False
