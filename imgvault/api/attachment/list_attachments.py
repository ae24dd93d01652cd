"""Enumerate attachment files."""

from collections.abc import Iterable

from ..link.is_image_path import IMAGE_EXTENSIONS, file_extension
from ..store._AbstractStore import _AbstractStore
from ..store._constants import DOCUMENT_EXTENSIONS
from .AttachmentKind import AttachmentKind
from .AttachmentRecord import AttachmentRecord


async def list_attachments(
    store: _AbstractStore, kind: AttachmentKind | str = AttachmentKind.IMAGE, excluded_extensions: Iterable[str] = ()
) -> list[AttachmentRecord]:
    """All store files of ``kind`` that are not documents, in enumeration order.

    Files whose extension is in ``excluded_extensions`` are left out.
    """
    kind = AttachmentKind(kind)
    excluded = {ext.lstrip(".").lower() for ext in excluded_extensions}
    records = []
    for path in await store.list_files():
        extension = file_extension(path)
        if extension in DOCUMENT_EXTENSIONS or extension in excluded:
            continue
        if kind is AttachmentKind.IMAGE and extension not in IMAGE_EXTENSIONS:
            continue
        records.append(AttachmentRecord(path=path, extension=extension))
    return records
