from __future__ import annotations

import asyncio
import sys

from atrides_diary.engine.entries import EntryBook
from atrides_diary.engine.types import Config, DiaryEntry
from atrides_diary.store import aload_all, asave_all, storage_path


async def _add_entry(*, config: Config, title: str, content: str) -> DiaryEntry | None:
    path = storage_path(config)
    book = EntryBook(await aload_all(path, strict=config.strict))

    try:
        entry = book.add(title, content)
    except ValueError as e:
        print(str(e))
        return None

    # Best effort: a failed save is logged by the store and the entry is lost.
    await asave_all(book.entries, path, strict=config.strict)
    return entry


def main(*, config: Config, title: str, content: str) -> int:
    if content == "-":
        content = sys.stdin.read()

    entry = asyncio.run(_add_entry(config=config, title=title, content=content))
    if entry is None:
        return 1

    print(f"Entry saved: {entry.id}")
    return 0
