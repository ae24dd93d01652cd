"""Attachment domain: reachability analysis and cleanup of unused files."""

from .._output_schemas.attachment import AttachmentCleanOutput, AttachmentUnusedOutput
from .AttachmentKind import AttachmentKind
from .AttachmentRecord import AttachmentRecord
from .CleanupResult import CleanupResult
from .delete_unused import delete_unused
from .is_in_excluded_folder import is_in_excluded_folder
from .list_attachments import list_attachments
from .ReachabilityAnalyzer import ReachabilityAnalyzer

__all__ = [
    "AttachmentCleanOutput",
    "AttachmentKind",
    "AttachmentRecord",
    "AttachmentUnusedOutput",
    "CleanupResult",
    "ReachabilityAnalyzer",
    "delete_unused",
    "is_in_excluded_folder",
    "list_attachments",
]
