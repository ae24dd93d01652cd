"""Compiled link patterns.

Targets may contain spaces but not brackets or parentheses. An optional
``"title"`` after a markdown-image target is not part of the target.
"""

import re

_MD_TARGET = r'(?P<target>[^()\s][^()]*?)(?:\s+"[^"]*")?'

# ![[target]] or ![[target|alt]]
BRACKET_EMBED_PATTERN = re.compile(r"!\[\[(?P<target>[^\[\]|]+?)(?:\|(?P<alt>[^\[\]]*))?\]\]")

# ![alt](target)
MARKDOWN_IMAGE_PATTERN = re.compile(r"!\[(?P<alt>[^\[\]]*)\]\(" + _MD_TARGET + r"\)")

# [![alt](target)](href)
LINK_WRAPPED_PATTERN = re.compile(
    r"\[!\[(?P<alt>[^\[\]]*)\]\(" + _MD_TARGET + r"\)\]\((?P<href>[^()\s][^()]*?)\)"
)
