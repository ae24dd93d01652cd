"""Unit tests for ImgVaultConfig and get_home_dir."""

import json

import pytest
from pydantic import ValidationError

from imgvault.api.config import ConvertConfig, ImgVaultConfig, StoreConfig, get_home_dir
from imgvault.api.link import LinkStyle
from tests.unit.conftest import write_config

pytestmark = pytest.mark.config


def test_get_home_dir_from_env(_isolated_home):
    assert get_home_dir() == _isolated_home.resolve()
    assert get_home_dir("config.json") == _isolated_home.resolve() / "config.json"


def test_get_home_dir_defaults_under_home(monkeypatch, tmp_path):
    monkeypatch.delenv("IMGVAULT_HOME")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_home_dir() == tmp_path / ".imgvault"


def test_load_minimal_fills_defaults(imgvault_home, vault_dir):
    config = ImgVaultConfig.load()

    assert config.store.base_dir == str(vault_dir)
    assert config.link.style is LinkStyle.BRACKET_EMBED
    assert config.convert.format == "JPEG"
    assert config.convert.extension == "jpg"
    assert config.fetch.referers == []
    assert config.rename.enabled is True
    assert config.cleanup.delete_option == "trash"
    assert config.log.level == "INFO"


def test_load_missing_file():
    with pytest.raises(ValueError, match="Configuration file not found"):
        ImgVaultConfig.load()


def test_load_invalid_json(_isolated_home):
    _isolated_home.mkdir(parents=True)
    (_isolated_home / "config.json").write_text("{broken", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid JSON"):
        ImgVaultConfig.load()


@pytest.mark.parametrize(
    ("override", "field"),
    [
        ({"convert": {"quality": 2.0}}, "convert.quality"),
        ({"link": {"style": "html"}}, "link.style"),
        ({"cleanup": {"delete_option": "shred"}}, "cleanup.delete_option"),
        ({"unknown": {}}, "unknown"),
    ],
)
def test_load_validation_error_names_field(_isolated_home, minimal_config_dict, override, field):
    write_config(_isolated_home, {**minimal_config_dict, **override})

    with pytest.raises(ValueError, match=f"Configuration validation error: {field}"):
        ImgVaultConfig.load()


def test_store_section_required():
    with pytest.raises(ValidationError):
        ImgVaultConfig()


def test_save_round_trips(imgvault_home):
    config = ImgVaultConfig.load()
    config.convert = ConvertConfig(format="PNG", color_depth=0.5)
    config.save()

    saved = json.loads((imgvault_home / "config.json").read_text(encoding="utf-8"))
    assert saved["convert"] == {"format": "PNG", "quality": 0.8, "color_depth": 0.5}
    assert saved["link"] == {"style": "bracket-embed"}
    assert ImgVaultConfig.load().convert.extension == "png"
    assert list(imgvault_home.glob(".config.*.tmp")) == []


def test_store_config_normalization(tmp_path):
    store = StoreConfig(
        base_dir=str(tmp_path),
        attachment_dir=" ./img/ ",
        excluded_folders=["/templates/", " "],
        excluded_extensions=[".PDF", "zip"],
    )

    assert store.attachment_dir == "./img"
    assert store.excluded_folders == ["templates"]
    assert store.excluded_extensions == ["pdf", "zip"]


def test_referer_table_keeps_order(minimal_config_dict):
    config = ImgVaultConfig(
        **minimal_config_dict,
        fetch={
            "referers": [
                {"url_pattern": "cdn.a", "referer": "https://a/"},
                {"url_pattern": "cdn", "referer": "https://generic/"},
            ]
        },
    )
    assert [m.url_pattern for m in config.fetch.referers] == ["cdn.a", "cdn"]
