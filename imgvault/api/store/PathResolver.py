"""Resolve raw link targets to canonical store paths."""

from collections.abc import Sequence
from posixpath import basename

from ..link.encode_path import decode_path
from ..link.is_remote_url import is_remote_url
from .normalize_store_path import normalize_store_path, parent_dir
from .ResolvedTarget import ResolvedTarget
from .TargetKind import TargetKind


class PathResolver:
    """Maps link targets found in a document to files in the store.

    Works on a snapshot of the store's file list, taken once per batch.
    Resolution never raises: an unresolvable target comes back with
    ``canonical_path=None``.
    """

    def __init__(self, files: Sequence[str], attachment_dir: str):
        self._files = list(files)
        self._file_set = set(self._files)
        self.attachment_dir = attachment_dir

    def _exists(self, path: str | None) -> bool:
        return path is not None and path in self._file_set

    def _attachment_candidate(self, name: str, document_dir: str) -> str | None:
        if self.attachment_dir.startswith("./"):
            return normalize_store_path(name, normalize_store_path(self.attachment_dir, document_dir) or "")
        return normalize_store_path(name, self.attachment_dir)

    def _search_by_name(self, name: str) -> str | None:
        # First match in enumeration order; duplicates elsewhere are not ranked
        for path in self._files:
            if basename(path) == name:
                return path
        return None

    def resolve(self, raw_target: str, document_path: str) -> ResolvedTarget:
        """Resolve ``raw_target`` as written in ``document_path``.

        Order, first success wins: remote URL, literal store path, explicit
        relative path, then for bare file names the attachment folder, the
        document's folder and finally a search of the whole store.
        """
        if is_remote_url(raw_target):
            return ResolvedTarget(raw_target, None, TargetKind.REMOTE)

        target = decode_path(raw_target).strip()
        document_dir = parent_dir(document_path)

        def found(path: str | None) -> ResolvedTarget:
            return ResolvedTarget(raw_target, path, TargetKind.LOCAL)

        if not target:
            return found(None)

        if self._exists(target):
            return found(target)

        if "../" in target or target.startswith("./"):
            relative = normalize_store_path(target, document_dir)
            return found(relative if self._exists(relative) else None)

        if "/" not in target:
            for candidate in (
                self._attachment_candidate(target, document_dir),
                normalize_store_path(target, document_dir),
            ):
                if self._exists(candidate):
                    return found(candidate)
            return found(self._search_by_name(target))

        return found(None)
