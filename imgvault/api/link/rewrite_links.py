"""Rewrite image links according to an old-target to new-path mapping."""

import re
from collections.abc import Mapping

from ._patterns import BRACKET_EMBED_PATTERN, LINK_WRAPPED_PATTERN, MARKDOWN_IMAGE_PATTERN
from .LinkStyle import LinkStyle
from .render_link import render_link


def _rewrite_wrapped(text: str, rewrite_map: Mapping[str, str], style: LinkStyle) -> list[tuple[str, bool]]:
    """First pass: replace link-wrapped composites.

    Returns text segments flagged True when they belong to a composite (rewritten
    or not); those are excluded from the second pass.
    """
    segments: list[tuple[str, bool]] = []
    cursor = 0
    for match in LINK_WRAPPED_PATTERN.finditer(text):
        segments.append((text[cursor : match.start()], False))
        target, href = match.group("target"), match.group("href")
        key = target if target in rewrite_map else href if href in rewrite_map else None
        if key is None:
            segments.append((match.group(0), True))
        else:
            segments.append((render_link(rewrite_map[key], match.group("alt"), style), True))
        cursor = match.end()
    segments.append((text[cursor:], False))
    return segments


def _simple_matches(text: str) -> list[re.Match[str]]:
    """Markdown images and bracket embeds of ``text`` in order, without overlaps."""
    candidates = sorted(
        [*MARKDOWN_IMAGE_PATTERN.finditer(text), *BRACKET_EMBED_PATTERN.finditer(text)],
        key=lambda match: match.start(),
    )
    matches: list[re.Match[str]] = []
    cursor = 0
    for match in candidates:
        if match.start() >= cursor:
            matches.append(match)
            cursor = match.end()
    return matches


def _rewrite_simple(text: str, rewrite_map: Mapping[str, str], style: LinkStyle) -> str:
    """Second pass: replace markdown images and bracket embeds in residual text.

    Both syntaxes are matched against the input in one scan, so a rendered
    replacement is never matched again.
    """
    parts: list[str] = []
    cursor = 0
    for match in _simple_matches(text):
        parts.append(text[cursor : match.start()])
        target = match.group("target")
        if target in rewrite_map:
            parts.append(render_link(rewrite_map[target], match.group("alt") or "", style))
        else:
            parts.append(match.group(0))
        cursor = match.end()
    parts.append(text[cursor:])
    return "".join(parts)


def rewrite_links(text: str, rewrite_map: Mapping[str, str], style: LinkStyle | str) -> str:
    """Rewrite every link whose raw target is a key of ``rewrite_map``.

    Matched links are replaced by ``render_link(rewrite_map[target], alt, style)``;
    everything else is left byte-identical. Link-wrapped composites are handled
    first and collapse to a plain link; simple links are rewritten in the
    remaining text. Pure, and a no-op for an empty mapping.
    """
    if not rewrite_map:
        return text
    style = LinkStyle(style)
    return "".join(
        segment if is_composite else _rewrite_simple(segment, rewrite_map, style)
        for segment, is_composite in _rewrite_wrapped(text, rewrite_map, style)
    )
