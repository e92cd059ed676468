from __future__ import annotations

from pathlib import Path

from atrides_diary.store import ensure_default_config_file, get_config_path


def main(*, path: Path | None = None, force: bool = False) -> int:
    config_path = path or get_config_path()

    if config_path.exists() and not force:
        print(f"Config already exists: {config_path}")
        print("Re-run with --force to overwrite")
        return 1

    try:
        ensure_default_config_file(config_path, force=force)
    except OSError as e:
        print(f"Could not write config: {e}")
        return 1

    print(f"Wrote default config: {config_path}")
    return 0
