"""Unit tests for extension_for."""

import pytest

from imgvault.api.fetch import extension_for

pytestmark = pytest.mark.fetch


@pytest.mark.parametrize(
    "content_type,url,expected",
    [
        ("image/png", "http://x/a", ".png"),
        ("image/jpeg; charset=binary", "http://x/a", ".jpg"),
        ("IMAGE/WEBP", "http://x/a", ".webp"),
        ("image/svg+xml", "http://x/a", ".svg"),
        ("image/x-unknown", "http://x/a.tiff?size=2", ".tiff"),
        ("image/x-unknown", "http://x/a", ".jpg"),
        ("application/octet-stream", "http://x/a.webp", ".webp"),
        ("application/octet-stream", "http://x/a.png", None),
        ("application/json", "http://x/a.png", None),
        ("", "http://x/a.png", None),
    ],
)
def test_extension_for(content_type, url, expected):
    assert extension_for(content_type, url) == expected
