"""Document domain: processing remote images and link styles of one document."""

from .._output_schemas.document import (
    DocumentConvertOutput,
    DocumentPasteOutput,
    DocumentPasteUrlOutput,
    DocumentPreviewOutput,
    DocumentProcessOutput,
)
from .process_document import process_document
from .ProcessResult import ProcessResult
from .store_pasted_image import store_pasted_image

__all__ = [
    "DocumentConvertOutput",
    "DocumentPasteOutput",
    "DocumentPasteUrlOutput",
    "DocumentPreviewOutput",
    "DocumentProcessOutput",
    "ProcessResult",
    "process_document",
    "store_pasted_image",
]
