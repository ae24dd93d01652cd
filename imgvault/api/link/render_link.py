"""Render a canonical path as an image link."""

from .encode_path import decode_path, encode_path
from .LinkStyle import LinkStyle


def render_link(canonical_path: str, alt_text: str, style: LinkStyle | str) -> str:
    """Render ``canonical_path`` in the requested link style.

    Bracket embeds keep spaces literally; markdown images percent-encode them.
    Link-wrapped composites are never produced.
    """
    style = LinkStyle(style)
    if style is LinkStyle.BRACKET_EMBED:
        path = decode_path(canonical_path)
        return f"![[{path}|{alt_text}]]" if alt_text else f"![[{path}]]"
    return f"![{alt_text}]({encode_path(canonical_path)})"
