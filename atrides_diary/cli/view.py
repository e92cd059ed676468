from __future__ import annotations

from atrides_diary.engine.entries import EntryBook
from atrides_diary.engine.types import Config, DiaryEntry
from atrides_diary.store import load_all, storage_path


def _preview(text: str, limit: int) -> str:
    # Single line, cut to the configured width.
    flat = " ".join(text.split())
    if len(flat) <= limit:
        return flat
    return flat[: max(0, limit - 3)] + "..."


def _format_line(entry: DiaryEntry, config: Config) -> str:
    when = entry.date.strftime(config.date_format)
    return f"{entry.id}  {when}  {entry.title} - {_preview(entry.content, config.preview_chars)}"


def _load_book(config: Config) -> EntryBook:
    return EntryBook(load_all(storage_path(config), strict=config.strict))


def list_main(*, config: Config, limit: int | None = None) -> int:
    book = _load_book(config)

    if not len(book):
        print("No diary entries yet. Add the first one with `atrides-diary add`.")
        return 0

    entries = list(book)
    if limit is not None:
        entries = entries[: max(0, limit)]

    for entry in entries:
        print(_format_line(entry, config))
    return 0


def show_main(*, config: Config, entry_id: str) -> int:
    entry = _load_book(config).get(entry_id)
    if entry is None:
        print(f"No entry with id {entry_id}")
        return 1

    print(entry.title)
    print(f"Date: {entry.date.day}/{entry.date.month}/{entry.date.year}")
    print("-" * 40)
    print(entry.content)
    return 0
