"""YAML front-matter parsing."""

import logging
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def parse_frontmatter(text: str, path: str = "") -> dict[str, Any] | None:
    """Return the YAML front-matter mapping at the top of ``text``.

    Returns None when there is no front-matter block, when it is not a
    mapping, or when it is not valid YAML.
    """
    if not text.startswith("---"):
        return None
    lines = text.splitlines()
    if lines[0].strip() != "---":
        return None
    for index, line in enumerate(lines[1:], start=1):
        if line.strip() in ("---", "..."):
            block = "\n".join(lines[1:index])
            break
    else:
        return None

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        logger.warning("Invalid front-matter in %s: %s", path or "<text>", e)
        return None
    return data if isinstance(data, dict) else None
