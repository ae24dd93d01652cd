"""Unit tests for RenameCoordinator."""

import asyncio

import pytest

from imgvault.api.link import LinkStyle
from imgvault.api.rename import RenameCoordinator, RenameState
from imgvault.api.store import _AbstractStore
from tests.unit.fakes import names

pytestmark = pytest.mark.rename


def _put(vault_dir, rel: str, content: str | bytes = b"img"):
    path = vault_dir / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, str):
        path.write_text(content, encoding="utf-8")
    else:
        path.write_bytes(content)
    return path


def _renamed(store, old, new, **kwargs):
    coordinator = RenameCoordinator(store, **kwargs)
    return asyncio.run(coordinator.on_document_renamed(old, new))


def test_reuses_disambiguator_and_rewrites(store, vault_dir):
    doc = _put(vault_dir, "new.md", "![[old_x9z2q.png]]")
    _put(vault_dir, "old_x9z2q.png")

    result = _renamed(store, "old.md", "new.md")

    assert result.state is RenameState.DONE
    assert result.renamed == {"old_x9z2q.png": "new_x9z2q.png"}
    assert (vault_dir / "new_x9z2q.png").exists()
    assert not (vault_dir / "old_x9z2q.png").exists()
    assert doc.read_text(encoding="utf-8") == "![[new_x9z2q.png]]"


def test_generates_disambiguator_and_keeps_alt(store, vault_dir):
    doc = _put(vault_dir, "notes/trip.md", "Day one ![beach](../attachments/photo.jpg) and ![[photo.jpg|again]]")
    _put(vault_dir, "attachments/photo.jpg")

    result = _renamed(store, "notes/draft.md", "notes/trip.md", name_generator=names(["k7m2p"]))

    assert result.renamed == {"attachments/photo.jpg": "attachments/trip_k7m2p.jpg"}
    assert doc.read_text(encoding="utf-8") == (
        "Day one ![[attachments/trip_k7m2p.jpg|beach]] and ![[attachments/trip_k7m2p.jpg|again]]"
    )


def test_markdown_link_style(store, vault_dir):
    doc = _put(vault_dir, "new.md", "![[old_x9z2q.png|cap]]")
    _put(vault_dir, "old_x9z2q.png")

    _renamed(store, "old.md", "new.md", link_style=LinkStyle.MARKDOWN)

    assert doc.read_text(encoding="utf-8") == "![cap](new_x9z2q.png)"


def test_collision_is_recorded_and_link_kept(store, vault_dir):
    doc = _put(vault_dir, "new.md", "![[old_x9z2q.png]] ![[old_abcde.png]]")
    _put(vault_dir, "old_x9z2q.png")
    _put(vault_dir, "new_x9z2q.png", b"someone else")
    _put(vault_dir, "old_abcde.png")

    result = _renamed(store, "old.md", "new.md")

    assert result.state is RenameState.DONE
    assert result.failures == {"old_x9z2q.png": "destination exists"}
    assert result.renamed == {"old_abcde.png": "new_abcde.png"}
    assert (vault_dir / "new_x9z2q.png").read_bytes() == b"someone else"
    assert doc.read_text(encoding="utf-8") == "![[old_x9z2q.png]] ![[new_abcde.png]]"
    assert result.summary() == "Renamed attachments: succeeded 1 / failed 1"


def test_remote_unresolved_and_non_image_links_untouched(store, vault_dir):
    text = "![r](https://x.com/a.png) ![[missing.png]] ![[old_x9z2q.pdf]]"
    doc = _put(vault_dir, "new.md", text)
    _put(vault_dir, "old_x9z2q.pdf")

    result = _renamed(store, "old.md", "new.md")

    assert result.state is RenameState.DONE
    assert result.renamed == {}
    assert result.summary() == "No attachments to rename"
    assert doc.read_text(encoding="utf-8") == text


@pytest.mark.parametrize(("old", "new"), [("a.canvas", "b.canvas"), ("dir1/same.md", "dir2/same.md")])
def test_no_op_events(store, vault_dir, old, new):
    _put(vault_dir, new, "![[old_x9z2q.png]]")
    _put(vault_dir, "old_x9z2q.png")

    result = _renamed(store, old, new)

    assert result.state is RenameState.DONE
    assert result.renamed == {}
    assert (vault_dir / "old_x9z2q.png").exists()


def test_unreadable_document_fails(store):
    result = _renamed(store, "old.md", "new.md")

    assert result.state is RenameState.FAILED
    assert result.error
    assert result.summary().startswith("Rename of new.md failed")


def test_write_failure_fails(store, vault_dir, monkeypatch):
    _put(vault_dir, "new.md", "![[old_x9z2q.png]]")
    _put(vault_dir, "old_x9z2q.png")

    async def refuse(path, text):
        raise PermissionError("read-only")

    monkeypatch.setattr(store, "write", refuse)

    result = _renamed(store, "old.md", "new.md")

    assert result.state is RenameState.FAILED
    assert result.renamed == {"old_x9z2q.png": "new_x9z2q.png"}
    assert "read-only" in result.error


def test_store_is_abstract_store(store):
    assert isinstance(store, _AbstractStore)
