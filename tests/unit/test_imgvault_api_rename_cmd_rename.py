"""Unit tests for cmd_rename."""

import pytest

from imgvault.api.rename.cmd_rename import cmd_rename
from tests.unit.conftest import run_cmd, write_config

pytestmark = pytest.mark.rename


def test_renames_document_and_attachments(imgvault_home, vault_dir):
    (vault_dir / "old.md").write_text("![[old_x9z2q.png]]", encoding="utf-8")
    (vault_dir / "old_x9z2q.png").write_bytes(b"img")

    result = run_cmd(cmd_rename, "old.md", "new.md")

    assert result.success is True
    assert result.output["state"] == "done"
    assert result.output["renamed"] == {"old_x9z2q.png": "new_x9z2q.png"}
    assert (vault_dir / "new.md").read_text(encoding="utf-8") == "![[new_x9z2q.png]]"
    assert not (vault_dir / "old.md").exists()


def test_disabled_only_moves_document(imgvault_home, vault_dir, minimal_config_dict):
    write_config(imgvault_home, {**minimal_config_dict, "rename": {"enabled": False}})
    (vault_dir / "old.md").write_text("![[old_x9z2q.png]]", encoding="utf-8")
    (vault_dir / "old_x9z2q.png").write_bytes(b"img")

    result = run_cmd(cmd_rename, "old.md", "new.md")

    assert result.success is True
    assert result.output["renamed_count"] == 0
    assert (vault_dir / "old_x9z2q.png").exists()
    assert (vault_dir / "new.md").exists()


def test_missing_document(imgvault_home):
    result = run_cmd(cmd_rename, "nope.md", "new.md")

    assert result.success is False
    assert result.output["state"] == "failed"


def test_destination_exists(imgvault_home, vault_dir):
    (vault_dir / "old.md").write_text("a", encoding="utf-8")
    (vault_dir / "new.md").write_text("b", encoding="utf-8")

    result = run_cmd(cmd_rename, "old.md", "new.md")

    assert result.success is False
    assert (vault_dir / "old.md").read_text(encoding="utf-8") == "a"


def test_attachment_failure_is_a_warning(imgvault_home, vault_dir):
    (vault_dir / "old.md").write_text("![[old_x9z2q.png]]", encoding="utf-8")
    (vault_dir / "old_x9z2q.png").write_bytes(b"img")
    (vault_dir / "new_x9z2q.png").write_bytes(b"taken")

    result = run_cmd(cmd_rename, "old.md", "new.md")

    assert result.success is True
    assert result.output["failed_count"] == 1
    assert result.output["warnings"] == ["old_x9z2q.png: destination exists"]
    assert "[rename] WARN" in (imgvault_home / "logfile").read_text(encoding="utf-8")
