"""Unit tests for paste_url_into_selection."""

import pytest

from imgvault.api.link import paste_url_into_selection

pytestmark = pytest.mark.link


def test_plain_link():
    assert paste_url_into_selection("docs", "https://example.com/page") == "[docs](https://example.com/page)"


def test_embed_when_pattern_matches():
    result = paste_url_into_selection("pic", "https://i.example.com/a.png", [r"\.png$"])
    assert result == "![pic](https://i.example.com/a.png)"


def test_url_without_scheme():
    assert paste_url_into_selection("site", "example.com/page") == "[site](example.com/page)"


def test_clipboard_is_trimmed():
    assert paste_url_into_selection("x", "  https://a.io  ") == "[x](https://a.io)"


@pytest.mark.parametrize(
    "selection,clipboard",
    [
        ("", "https://example.com"),
        ("   ", "https://example.com"),
        ("text", "not a url"),
        ("text", "https://a.io and more"),
        ("text", ""),
    ],
)
def test_default_paste(selection, clipboard):
    assert paste_url_into_selection(selection, clipboard) is None


def test_blank_patterns_are_ignored():
    assert paste_url_into_selection("a", "https://x.io/a.png", ["", "  "]) == "[a](https://x.io/a.png)"
