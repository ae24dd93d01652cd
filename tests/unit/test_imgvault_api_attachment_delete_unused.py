"""Unit tests for delete_unused and is_in_excluded_folder."""

import asyncio

import pytest

from imgvault.api.attachment import AttachmentRecord, delete_unused, is_in_excluded_folder

pytestmark = pytest.mark.attachment


def _records(vault_dir, *paths):
    for rel in paths:
        target = vault_dir / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"img")
    return [AttachmentRecord(path=p, extension=p.rsplit(".", 1)[-1]) for p in paths]


@pytest.mark.parametrize(
    ("path", "folders", "subfolders", "expected"),
    [
        ("keep/a.png", ["keep"], False, True),
        ("keep/deep/a.png", ["keep"], False, False),
        ("keep/deep/a.png", ["keep/"], True, True),
        ("keeper/a.png", ["keep"], True, False),
        ("a.png", ["keep"], True, False),
    ],
)
def test_is_in_excluded_folder(path, folders, subfolders, expected):
    assert is_in_excluded_folder(path, folders, subfolders) is expected


def test_trash_moves_into_trash_folder(store, vault_dir):
    records = _records(vault_dir, "attachments/a.png")

    result = asyncio.run(delete_unused(store, records, "trash"))

    assert result.deleted == ["attachments/a.png"]
    assert not (vault_dir / "attachments/a.png").exists()
    assert (vault_dir / ".trash/attachments/a.png").read_bytes() == b"img"


def test_permanent_delete(store, vault_dir):
    records = _records(vault_dir, "a.png")

    result = asyncio.run(delete_unused(store, records, "permanent"))

    assert result.deleted == ["a.png"]
    assert not (vault_dir / "a.png").exists()
    assert not (vault_dir / ".trash").exists()


def test_excluded_folders_are_kept(store, vault_dir):
    records = _records(vault_dir, "keep/a.png", "other/b.png")

    result = asyncio.run(delete_unused(store, records, "permanent", ["keep"]))

    assert result.excluded == ["keep/a.png"]
    assert result.deleted == ["other/b.png"]
    assert (vault_dir / "keep/a.png").exists()


def test_failure_recorded_and_batch_continues(store, vault_dir):
    records = [AttachmentRecord(path="gone.png", extension="png"), *_records(vault_dir, "b.png")]

    result = asyncio.run(delete_unused(store, records, "permanent"))

    assert list(result.failures) == ["gone.png"]
    assert result.deleted == ["b.png"]
