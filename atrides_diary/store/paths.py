from __future__ import annotations

from pathlib import Path

from platformdirs import user_data_dir

from atrides_diary.engine.types import Config


APP_NAME = "atrides-diary"
STORAGE_FILENAME = "atrides_diary_data.json"


def get_data_dir(config: Config | None = None) -> Path:
    if config is not None and config.data_dir:
        return Path(config.data_dir).expanduser()
    return Path(user_data_dir(APP_NAME))


def storage_path(config: Config | None = None) -> Path:
    return get_data_dir(config) / STORAGE_FILENAME
