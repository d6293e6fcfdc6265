"""
Tests for wallow.config

WALLOW_CONFIG_DIR points into tmp_path for every test (see conftest.isolated_environment).
"""

import json
from pathlib import Path

import pytest

from wallow import config as wallow_config
from wallow.config import WallowConfig, WallowConfigError
from wallow.errors import FilesystemFailureError


@pytest.fixture
def config_dir(tmp_path) -> Path:
    return tmp_path / "config"


def test_default_config_dir_honours_environment(config_dir):
    assert wallow_config.default_config_dir() == config_dir


def test_init_writes_default_config(config_dir):
    loaded = wallow_config.init()

    written = json.loads((config_dir / "config.json").read_text())
    assert set(written) == set(WallowConfig.keys())
    assert loaded == WallowConfig()


def test_init_keeps_existing_config(config_dir, tmp_path):
    WallowConfig(wallpaper_dir=tmp_path / "mine", sorting="toplist").generate_config_json()

    loaded = wallow_config.init()

    assert loaded.wallpaper_dir == tmp_path / "mine"
    assert loaded.sorting == "toplist"


def test_round_trip_paths(tmp_path, config_dir):
    original = WallowConfig(wallpaper_dir=tmp_path / "a", converted_dir=tmp_path / "b")
    original.generate_config_json(config_dir)

    loaded = wallow_config.load_config(config_dir)

    assert isinstance(loaded.wallpaper_dir, Path)
    assert loaded == original


def test_load_config_missing(config_dir):
    with pytest.raises(WallowConfigError):
        wallow_config.load_config(config_dir)


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_load_config_invalid(config_dir, content):
    config_dir.mkdir()
    (config_dir / "config.json").write_text(content)

    with pytest.raises(WallowConfigError):
        wallow_config.load_config(config_dir)


def test_load_config_ignores_unknown_keys(config_dir, caplog):
    config_dir.mkdir()
    (config_dir / "config.json").write_text(json.dumps({"sorting": "random", "colour": "red"}))

    loaded = wallow_config.load_config(config_dir)

    assert loaded.sorting == "random"
    assert "colour" in caplog.text


def test_credential_environment_wins(monkeypatch):
    config = WallowConfig(wallhaven_api_key="persisted")

    assert config.credential_for("wallhaven") == "persisted"

    monkeypatch.setenv("WALLHAVEN_API_KEY", "from-env")
    assert config.credential_for("wallhaven") == "from-env"


def test_credential_empty_is_unset(monkeypatch):
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY", "")
    config = WallowConfig(unsplash_access_key="")

    assert config.credential_for("unsplash") is None


def test_credential_from_dotenv(config_dir):
    config_dir.mkdir()
    (config_dir / ".env").write_text("UNSPLASH_ACCESS_KEY=dotenv-key\n")
    WallowConfig().generate_config_json(config_dir)

    loaded = wallow_config.load_config(config_dir)

    assert loaded.credential_for("unsplash") == "dotenv-key"


def test_dotenv_does_not_override_environment(config_dir, monkeypatch):
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY", "from-env")
    config_dir.mkdir()
    (config_dir / ".env").write_text("UNSPLASH_ACCESS_KEY=dotenv-key\n")
    WallowConfig().generate_config_json(config_dir)

    assert wallow_config.load_config(config_dir).credential_for("unsplash") == "from-env"


def test_set_with_alias():
    config = WallowConfig()

    assert config.set("res", "1920x1080") == "resolution"
    assert config.set("provider", "unsplash") == "source"
    assert config.resolution == "1920x1080"
    assert config.source == "unsplash"


def test_set_directory_becomes_path(tmp_path):
    config = WallowConfig()
    config.set("wallpaper_dir", str(tmp_path / "walls"))

    assert config.wallpaper_dir == tmp_path / "walls"


def test_set_unknown_key():
    with pytest.raises(WallowConfigError):
        WallowConfig().set("colour", "red")


def test_search_defaults():
    config = WallowConfig(query="lake", sorting="random")

    assert config.search_defaults() == {
        "query": "lake",
        "resolution": None,
        "categories": None,
        "purity": None,
        "sorting": "random",
    }


def test_credentials_are_not_shared_between_providers():
    config = WallowConfig(unsplash_access_key="unsplash-only")

    assert config.credential_for("unsplash") == "unsplash-only"
    assert config.credential_for("wallhaven") is None
    assert config.credential_for("picsum") is None


def test_ensure_dirs(tmp_path):
    config = WallowConfig(wallpaper_dir=tmp_path / "a", converted_dir=tmp_path / "a" / "b")
    config.ensure_dirs()

    assert (tmp_path / "a" / "b").is_dir()


def test_ensure_dirs_filesystem_failure(tmp_path):
    blocker = tmp_path / "not-a-folder"
    blocker.write_text("")
    config = WallowConfig(wallpaper_dir=blocker / "wallpapers", converted_dir=tmp_path / "c")

    with pytest.raises(FilesystemFailureError):
        config.ensure_dirs()


def test_to_json_matches_saved_file(tmp_path, config_dir):
    config = WallowConfig(wallpaper_dir=tmp_path / "a", query="lake")

    saved = config.generate_config_json()

    assert saved.read_text() == config.to_json()
    assert json.loads(config.to_json())["wallpaper_dir"] == str(tmp_path / "a")


def test_schema_lists_every_key():
    schema = WallowConfig.schema()

    assert schema["type"] == "object"
    assert set(schema["properties"]) == set(WallowConfig.keys())
    assert schema["properties"]["wallpaper_dir"]["type"] == "string"
    assert schema["properties"]["cron"]["type"] == ["string", "null"]
    assert all("description" in value for value in schema["properties"].values())
