"""Unit tests for PathResolver and store path normalization."""

import pytest

from imgvault.api.store import PathResolver, TargetKind, normalize_store_path

pytestmark = pytest.mark.store

FILES = [
    "attachments/a.png",
    "notes/a.png",
    "notes/b.png",
    "other/b.png",
    "deep/x/c.png",
    "deep/sub/d.png",
    "attachments/my pic.png",
    "notes/doc.md",
]


@pytest.fixture
def resolver() -> PathResolver:
    return PathResolver(FILES, "attachments")


def test_remote_target(resolver):
    target = resolver.resolve("https://x.com/a.png", "notes/doc.md")
    assert target.kind is TargetKind.REMOTE
    assert target.canonical_path is None
    assert not target.resolved


def test_attachment_folder_wins_over_document_folder(resolver):
    target = resolver.resolve("a.png", "notes/doc.md")
    assert target.kind is TargetKind.LOCAL
    assert target.canonical_path == "attachments/a.png"


def test_attachment_folder_wins_over_store_scan():
    resolver = PathResolver(["zzz/a.png", "attachments/a.png"], "attachments")
    assert resolver.resolve("a.png", "doc.md").canonical_path == "attachments/a.png"


def test_document_folder(resolver):
    assert resolver.resolve("b.png", "notes/doc.md").canonical_path == "notes/b.png"


def test_store_scan_first_match(resolver):
    assert resolver.resolve("c.png", "notes/doc.md").canonical_path == "deep/x/c.png"


def test_literal_store_path(resolver):
    assert resolver.resolve("other/b.png", "notes/doc.md").canonical_path == "other/b.png"


def test_parent_relative_path(resolver):
    assert resolver.resolve("../other/b.png", "notes/doc.md").canonical_path == "other/b.png"


def test_dot_relative_path(resolver):
    assert resolver.resolve("./b.png", "notes/doc.md").canonical_path == "notes/b.png"


def test_relative_path_not_found_is_unresolved(resolver):
    assert resolver.resolve("./c.png", "notes/doc.md").canonical_path is None


def test_path_with_separator_is_not_searched(resolver):
    assert resolver.resolve("sub/d.png", "notes/doc.md").canonical_path is None


def test_percent_encoded_target(resolver):
    target = resolver.resolve("my%20pic.png", "notes/doc.md")
    assert target.raw_target == "my%20pic.png"
    assert target.canonical_path == "attachments/my pic.png"


def test_climbing_above_root_is_unresolved(resolver):
    assert resolver.resolve("../../a.png", "notes/doc.md").canonical_path is None


def test_missing_file(resolver):
    assert resolver.resolve("nope.png", "notes/doc.md").canonical_path is None


def test_empty_target(resolver):
    assert resolver.resolve("  ", "notes/doc.md").canonical_path is None


def test_attachment_folder_relative_to_document():
    resolver = PathResolver(["assets/a.png", "notes/assets/a.png"], "./assets")
    assert resolver.resolve("a.png", "notes/doc.md").canonical_path == "notes/assets/a.png"


@pytest.mark.parametrize(
    "path,base,expected",
    [
        ("a/b/../c.png", "", "a/c.png"),
        ("./c.png", "notes", "notes/c.png"),
        ("../c.png", "notes/sub", "notes/c.png"),
        ("a//b/./c", "", "a/b/c"),
        ("../x", "", None),
    ],
)
def test_normalize_store_path(path, base, expected):
    assert normalize_store_path(path, base) == expected
