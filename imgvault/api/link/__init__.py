"""Link domain: syntax, extraction and rewriting of image links.

Everything here is pure text processing and independent of any store.
"""

from .convert_style import convert_style
from .encode_path import decode_path, encode_path
from .extract_from_node_graph import extract_from_node_graph
from .extract_from_text import extract_from_text
from .is_image_path import IMAGE_EXTENSIONS, file_extension, is_image_path
from .is_remote_url import is_remote_url
from .LinkKind import LinkKind
from .LinkOccurrence import LinkOccurrence, Span
from .LinkStyle import LinkStyle
from .match_links import match_links
from .ParseError import ParseError
from .paste_url_into_selection import paste_url_into_selection
from .render_link import render_link
from .rewrite_links import rewrite_links

__all__ = [
    "IMAGE_EXTENSIONS",
    "LinkKind",
    "LinkOccurrence",
    "LinkStyle",
    "ParseError",
    "Span",
    "convert_style",
    "decode_path",
    "encode_path",
    "extract_from_node_graph",
    "extract_from_text",
    "file_extension",
    "is_image_path",
    "is_remote_url",
    "match_links",
    "paste_url_into_selection",
    "render_link",
    "rewrite_links",
]
