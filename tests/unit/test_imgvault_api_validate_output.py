"""Unit tests for StageResult and validate_output."""

import pytest

from imgvault.api.attachment.cmd_unused import cmd_unused
from imgvault.api.StageResult import StageResult
from imgvault.api.validate_output import validate_output


def _unused_output(**overrides):
    output = {"kind": "image", "attachments_total": 1, "unused": [], "count": 0, "success": True}
    output.update(overrides)
    return output


def test_fills_default_lists():
    validated = validate_output(cmd_unused, _unused_output())
    assert validated["errors"] == []
    assert validated["warnings"] == []


def test_rejects_missing_field():
    output = _unused_output()
    del output["count"]
    with pytest.raises(ValueError, match="attachment.unused"):
        validate_output(cmd_unused, output)


def test_skips_non_api_functions():
    def helper():
        pass

    assert validate_output(helper, {"anything": 1}) == {"anything": 1}


def test_stage_result_defaults():
    result = StageResult(announce="x", progress_callback=lambda r: iter(()))
    assert result.result == ""
    assert result.output == {}
    assert result.success is False


def test_stage_result_run_drives_progress():
    seen = []

    def work(result_obj):
        yield (0.5, "half")
        seen.append("after")
        result_obj.result = "done"
        result_obj.success = True

    result = StageResult(announce="x", progress_callback=work).run()

    assert seen == ["after"]
    assert result.success is True
    assert result.result == "done"


def test_rejects_undeclared_keys():
    with pytest.raises(ValueError, match="AttachmentUnusedOutput"):
        validate_output(cmd_unused, _unused_output(extra_key=1))
