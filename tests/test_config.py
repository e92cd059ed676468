from pathlib import Path
from tempfile import TemporaryDirectory

from atrides_diary.engine.types import Config
from atrides_diary.store.config import default_config_toml, ensure_default_config_file, load_config


def test_load_config_defaults_when_missing():
    with TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.toml"
        cfg, meta = load_config(path, create_if_missing=False)

    assert isinstance(cfg, Config)
    assert cfg == Config()
    assert meta["loaded"] is False


def test_load_config_parses_values():
    with TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.toml"
        path.write_text(
            'data_dir = "~/diary"\n'
            "strict = true\n"
            'log_level = "debug"\n'
            "\n"
            "[display]\n"
            'date_format = "%Y-%m-%d"\n'
            "preview_chars = 20\n",
            encoding="utf-8",
        )

        cfg, meta = load_config(path)

    assert meta["loaded"] is True
    assert cfg.data_dir == "~/diary"
    assert cfg.strict is True
    assert cfg.log_level == "DEBUG"
    assert cfg.date_format == "%Y-%m-%d"
    assert cfg.preview_chars == 20


def test_load_config_ignores_invalid_values():
    with TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.toml"
        path.write_text(
            'strict = "yes"\n'
            'log_level = "loud"\n'
            "\n"
            "[display]\n"
            "preview_chars = 0\n",
            encoding="utf-8",
        )

        cfg, meta = load_config(path)

    assert meta["loaded"] is True
    assert cfg == Config()


def test_load_config_reports_malformed_file():
    with TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.toml"
        path.write_text("strict = = true\n", encoding="utf-8")

        cfg, meta = load_config(path)

    assert cfg == Config()
    assert meta["loaded"] is False
    assert meta["error"].startswith("config_read_error")


def test_default_config_round_trips(tmp_path):
    path = ensure_default_config_file(tmp_path / "nested" / "config.toml")

    assert path.read_text(encoding="utf-8") == default_config_toml()
    cfg, meta = load_config(path)
    assert meta["loaded"] is True
    assert cfg == Config()


def test_create_if_missing_marks_created(tmp_path):
    path = tmp_path / "config.toml"
    _, meta = load_config(path, create_if_missing=True)

    assert meta["created"] is True
    assert path.exists()
