"""Convert local image links between link styles."""

from .encode_path import decode_path
from .extract_from_text import extract_from_text
from .is_image_path import is_image_path
from .LinkKind import LinkKind
from .LinkStyle import LinkStyle
from .match_links import match_links
from .rewrite_links import rewrite_links

_SOURCE_KIND = {
    LinkStyle.BRACKET_EMBED: LinkKind.MARKDOWN_IMAGE,
    LinkStyle.MARKDOWN: LinkKind.BRACKET_EMBED,
}


def convert_style(text: str, style: LinkStyle | str) -> tuple[str, int]:
    """Render every local image link of the other style in ``style``.

    Markdown targets are percent-decoded on the way to bracket embeds and
    bracket targets are space-encoded on the way to markdown. URLs and
    non-image targets are left alone.

    Returns:
        The converted text and the number of links converted.
    """
    style = LinkStyle(style)
    source_kind = _SOURCE_KIND[style]

    rewrite_map = {
        occ.raw_target: decode_path(occ.raw_target)
        for occ in extract_from_text(text)
        if occ.kind is source_kind and is_image_path(decode_path(occ.raw_target))
    }
    if not rewrite_map:
        return text, 0

    converted = sum(1 for occ in match_links(text, source_kind) if occ.raw_target in rewrite_map)
    return rewrite_links(text, rewrite_map, style), converted
