from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from platformdirs import user_config_dir

from atrides_diary.engine.types import Config
from atrides_diary.store.paths import APP_NAME


LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def get_config_path() -> Path:
    return Path(user_config_dir(APP_NAME)) / "config.toml"


def default_config_toml(config: Config | None = None) -> str:
    cfg = config or Config()
    # Keep it minimal and editable.
    return (
        "# atrides-diary configuration\n"
        "# Location: ~/.config/atrides-diary/config.toml (or XDG_CONFIG_HOME)\n"
        "\n"
        "# Directory holding atrides_diary_data.json (default: platform data dir)\n"
        '# data_dir = "~/diary"\n'
        "\n"
        "# Raise storage errors instead of treating the diary as empty\n"
        f"strict = {str(cfg.strict).lower()}\n"
        "\n"
        f'log_level = "{cfg.log_level}"\n'
        "\n"
        "[display]\n"
        f'date_format = "{cfg.date_format}"\n'
        f"preview_chars = {cfg.preview_chars}\n"
    )


def ensure_default_config_file(path: Path | None = None, *, force: bool = False) -> Path:
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    if force or not config_path.exists():
        config_path.write_text(default_config_toml(), encoding="utf-8")
    return config_path


def load_config(path: Path | None = None, *, create_if_missing: bool = False) -> tuple[Config, dict]:
    """Load config.toml, returning (Config, meta).

    Meta contains useful diagnostics for status output.
    """

    config_path = path or get_config_path()
    meta: dict = {"path": str(config_path), "loaded": False, "created": False}

    if create_if_missing:
        before = config_path.exists()
        ensure_default_config_file(config_path)
        meta["created"] = not before

    if not config_path.exists():
        return Config(), meta

    try:
        raw = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        meta["error"] = f"config_read_error: {e}"
        return Config(), meta

    cfg = Config()

    data_dir = raw.get("data_dir")
    if isinstance(data_dir, str) and data_dir.strip():
        cfg.data_dir = data_dir.strip()

    if isinstance(raw.get("strict"), bool):
        cfg.strict = bool(raw["strict"])

    log_level = raw.get("log_level")
    if isinstance(log_level, str) and log_level.strip().upper() in LOG_LEVELS:
        cfg.log_level = log_level.strip().upper()

    display = raw.get("display")
    if isinstance(display, dict):
        date_format = display.get("date_format")
        if isinstance(date_format, str) and date_format:
            cfg.date_format = date_format

        preview = display.get("preview_chars")
        # bool is an int subclass; reject it explicitly.
        if isinstance(preview, int) and not isinstance(preview, bool) and preview > 0:
            cfg.preview_chars = preview

    meta["loaded"] = True
    return cfg, meta


def log_level_value(config: Config) -> int:
    return getattr(logging, config.log_level, logging.WARNING)
