from __future__ import annotations

import argparse
import logging
from pathlib import Path

from atrides_diary.engine.types import Config
from atrides_diary.store import StoreError, load_config, log_level_value


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="atrides-diary")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.toml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    list_p = sub.add_parser("list", help="List entries, newest first")
    list_p.add_argument("--limit", type=int, default=None, help="Show at most N entries")
    list_p.set_defaults(_handler="list")

    show_p = sub.add_parser("show", help="Show one entry in full")
    show_p.add_argument("entry_id", help="Entry id")
    show_p.set_defaults(_handler="show")

    add_p = sub.add_parser("add", help="Add a new entry")
    add_p.add_argument("--title", required=True, help="Entry title")
    add_p.add_argument("--content", required=True, help="Entry text ('-' reads stdin)")
    add_p.set_defaults(_handler="add")

    delete_p = sub.add_parser("delete", help="Delete an entry by id")
    delete_p.add_argument("entry_id", help="Entry id")
    delete_p.set_defaults(_handler="delete")

    status_p = sub.add_parser("status", help="Show config and storage locations")
    status_p.set_defaults(_handler="status")

    init_p = sub.add_parser("init", help="Write a default config.toml")
    init_p.add_argument("--force", action="store_true", help="Overwrite existing config")
    init_p.set_defaults(_handler="init")

    return parser


def _configure_logging(level: int) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=level)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args._handler == "init":
        from atrides_diary.cli.init import main as init_main

        return int(init_main(path=args.config, force=bool(args.force)))

    config, config_meta = load_config(args.config)
    _configure_logging(logging.DEBUG if args.verbose else log_level_value(config))

    try:
        return _dispatch(args, config=config, config_meta=config_meta)
    except (StoreError, OSError, UnicodeEncodeError) as e:
        # Only reachable in strict mode; otherwise the store logs and carries on.
        print(f"Storage error: {e}")
        return 1


def _dispatch(args: argparse.Namespace, *, config: Config, config_meta: dict) -> int:
    if args._handler == "list":
        from atrides_diary.cli.view import list_main

        return int(list_main(config=config, limit=args.limit))

    if args._handler == "show":
        from atrides_diary.cli.view import show_main

        return int(show_main(config=config, entry_id=args.entry_id))

    if args._handler == "add":
        from atrides_diary.cli.add import main as add_main

        return int(add_main(config=config, title=args.title, content=args.content))

    if args._handler == "delete":
        from atrides_diary.cli.delete import main as delete_main

        return int(delete_main(config=config, entry_id=args.entry_id))

    if args._handler == "status":
        from atrides_diary.cli.status import main as status_main

        return int(status_main(config=config, config_meta=config_meta))

    raise RuntimeError(f"Unknown command: {args._handler}")


if __name__ == "__main__":
    raise SystemExit(main())
