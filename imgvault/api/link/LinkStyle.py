"""Link styles rewritten image links can be rendered in."""

from enum import Enum


class LinkStyle(str, Enum):
    """Output syntax for rendered image links."""

    BRACKET_EMBED = "bracket-embed"
    MARKDOWN = "markdown"
