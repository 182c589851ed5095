import json
from pathlib import Path

import pytest

from instafilter import config
from instafilter.errors import SettingsInvalidError
from instafilter.settings import SettingsManager
from instafilter.utils.jsonio import read_json, write_json


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    settings = SettingsManager(tmp_path / "nope" / "settings.json")
    assert settings.get("filterCount", 0) == 0


def test_set_writes_through_to_disk(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    SettingsManager(path).set("filterCount", 5)

    assert json.loads(path.read_text(encoding="utf-8")) == {"filterCount": 5}
    assert not path.with_suffix(".json.tmp").exists()


def test_malformed_file_is_replaced(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    settings = SettingsManager(path)
    assert settings.get("filterCount") is None
    settings.set("filterCount", 1)
    assert read_json(path) == {"filterCount": 1}


def test_read_json_rejects_non_objects(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(SettingsInvalidError):
        read_json(path)


def test_write_json_creates_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "a" / "b" / "settings.json"
    write_json(path, {"k": "v"})
    assert read_json(path) == {"k": "v"}


def test_settings_path_honours_home_override(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv(config.HOME_ENV_VAR, str(tmp_path))
    assert config.settings_path() == tmp_path / config.SETTINGS_FILE_NAME
    assert SettingsManager().path == tmp_path / config.SETTINGS_FILE_NAME


def test_unreadable_file_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.mkdir()

    with pytest.raises(SettingsInvalidError):
        read_json(path)

    settings = SettingsManager(path)
    settings.load()
    assert settings.get("filterCount", 0) == 0
