"""Remove unused attachments from the store."""

import logging
from collections.abc import Iterable
from typing import Literal

from ..store._AbstractStore import _AbstractStore
from .AttachmentRecord import AttachmentRecord
from .CleanupResult import CleanupResult
from .is_in_excluded_folder import is_in_excluded_folder

logger = logging.getLogger(__name__)


async def delete_unused(
    store: _AbstractStore,
    records: Iterable[AttachmentRecord],
    delete_option: Literal["trash", "permanent"] = "trash",
    excluded_folders: Iterable[str] = (),
    exclude_subfolders: bool = False,
) -> CleanupResult:
    """Trash or delete each record outside the excluded folders.

    A failed removal is recorded and the rest of the batch continues.
    """
    excluded_folders = list(excluded_folders)
    result = CleanupResult()
    for record in records:
        if is_in_excluded_folder(record.path, excluded_folders, exclude_subfolders):
            result.excluded.append(record.path)
            continue
        try:
            if delete_option == "permanent":
                await store.delete(record.path)
            else:
                await store.trash(record.path)
        except OSError as e:
            logger.warning("Cannot remove %s: %s", record.path, e)
            result.failures[record.path] = str(e)
            continue
        result.deleted.append(record.path)
    return result
