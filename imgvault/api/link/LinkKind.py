"""Syntax kinds a discovered link can have."""

from enum import Enum


class LinkKind(str, Enum):
    """Which syntax an occurrence was found in."""

    BRACKET_EMBED = "bracket_embed"
    MARKDOWN_IMAGE = "markdown_image"
    LINK_WRAPPED = "link_wrapped"
    # Node-graph ``file`` nodes reference a path directly, with no syntax wrapper
    FILE_REFERENCE = "file_reference"
