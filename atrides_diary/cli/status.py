from __future__ import annotations

from atrides_diary.engine.types import Config
from atrides_diary.store import load_all, storage_path


def main(*, config: Config, config_meta: dict) -> int:
    path = storage_path(config)

    print("atrides-diary status")

    print(f"config: {config_meta.get('path')}")
    if config_meta.get("error"):
        print(f"config error: {config_meta.get('error')}")
    elif not config_meta.get("loaded"):
        print("config: not found (using defaults)")

    print(f"storage file: {path}")
    if not path.exists():
        print("storage file exists: no")
        print("entries: 0")
    else:
        print("storage file exists: yes")
        print(f"entries: {len(load_all(path, strict=config.strict))}")

    print(
        "settings: "
        f"strict={config.strict} "
        f"log_level={config.log_level} "
        f"date_format={config.date_format!r} "
        f"preview_chars={config.preview_chars}"
    )

    return 0
