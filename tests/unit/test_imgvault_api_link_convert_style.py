"""Unit tests for convert_style."""

import pytest

from imgvault.api.link import LinkStyle, convert_style

pytestmark = pytest.mark.link


def test_markdown_to_bracket_decodes_spaces():
    text, count = convert_style("![my alt](attachments/my%20pic.png)", LinkStyle.BRACKET_EMBED)
    assert text == "![[attachments/my pic.png|my alt]]"
    assert count == 1


def test_bracket_to_markdown_encodes_spaces():
    text, count = convert_style("![[attachments/my pic.png|cap]] and ![[b.jpg]]", LinkStyle.MARKDOWN)
    assert text == "![cap](attachments/my%20pic.png) and ![](b.jpg)"
    assert count == 2


def test_round_trip_preserves_alt_and_path():
    original = "Intro\n![first](attachments/a%20b.png)\n\n![](pics/c.jpg)\n"
    bracket, _ = convert_style(original, LinkStyle.BRACKET_EMBED)
    back, _ = convert_style(bracket, LinkStyle.MARKDOWN)
    assert back == original


def test_urls_and_non_images_are_left_alone():
    text = "![r](https://x/a.png) ![[notes.pdf]] ![[Other note]]"
    assert convert_style(text, LinkStyle.MARKDOWN) == (text, 0)


def test_links_already_in_target_style_count_zero():
    text = "![[a.png]]"
    assert convert_style(text, "bracket-embed") == (text, 0)
