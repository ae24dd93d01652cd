from enum import Enum


class AttachmentKind(str, Enum):
    """Which attachments an unused-attachment query covers."""

    IMAGE = "image"
    ALL = "all"
