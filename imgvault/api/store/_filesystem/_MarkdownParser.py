"""Markdown link parsing for the store's link index."""

from __future__ import annotations

__all__ = [
    "IndexedLink",
    "parse_index_links",
]

import re
from collections.abc import Iterator
from dataclasses import dataclass

from ...link.encode_path import decode_path

# Compiled regex patterns for performance
WIKILINK_PATTERN = re.compile(r"(!)?\[\[([^\]]+)\]\]")
MARKDOWN_URL_PATTERN = re.compile(r"(!)?\[([^\]]*)\]\(([^)]+)\)")


@dataclass(frozen=True)
class IndexedLink:
    """A link target as the host would index it."""

    line_number: int
    target: str
    is_embed: bool

    @staticmethod
    def split_alias(target: str) -> tuple[str, str]:
        """Split target|alias into components.

        Handles both regular pipes (|) and escaped pipes (\\|) used in tables.
        """
        if "\\|" in target:
            core, alias = target.split("\\|", 1)
            return core.strip(), alias.strip()
        if "|" in target:
            core, alias = target.split("|", 1)
            return core.strip(), alias.strip()
        return target.strip(), ""


def parse_index_links(text: str) -> Iterator[IndexedLink]:
    """Extract wiki links, embeds and markdown links from markdown text.

    Heading anchors (``#...``) are dropped; markdown targets are
    percent-decoded.
    """
    for line_num, line in enumerate(text.splitlines(), start=1):
        for match in WIKILINK_PATTERN.finditer(line):
            target, _alias = IndexedLink.split_alias(match.group(2))
            target = target.split("#", 1)[0].strip()
            if target:
                yield IndexedLink(line_number=line_num, target=target, is_embed=bool(match.group(1)))

        for match in MARKDOWN_URL_PATTERN.finditer(line):
            target = match.group(3).strip().split(' "', 1)[0]
            target = decode_path(target.split("#", 1)[0].strip())
            if target:
                yield IndexedLink(line_number=line_num, target=target, is_embed=bool(match.group(1)))
