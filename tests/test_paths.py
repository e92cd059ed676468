import sys

import pytest

from atrides_diary.engine.types import Config
from atrides_diary.store.paths import STORAGE_FILENAME, get_data_dir, storage_path


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG layout")
def test_storage_path_under_xdg_data_home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    assert storage_path() == tmp_path / "atrides-diary" / "atrides_diary_data.json"


def test_storage_path_is_stable():
    assert storage_path() == storage_path()
    assert storage_path().name == STORAGE_FILENAME


def test_config_data_dir_overrides_platform_dir(tmp_path):
    cfg = Config(data_dir=str(tmp_path / "mine"))

    assert get_data_dir(cfg) == tmp_path / "mine"
    assert storage_path(cfg) == tmp_path / "mine" / STORAGE_FILENAME


def test_config_data_dir_expands_user(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_data_dir(Config(data_dir="~/diary")) == tmp_path / "diary"
