from __future__ import annotations

import asyncio

from atrides_diary.engine.entries import EntryBook
from atrides_diary.engine.types import Config
from atrides_diary.store import aload_all, asave_all, storage_path


async def _delete_entry(*, config: Config, entry_id: str) -> bool:
    path = storage_path(config)
    book = EntryBook(await aload_all(path, strict=config.strict))

    if not book.delete(entry_id):
        return False

    await asave_all(book.entries, path, strict=config.strict)
    return True


def main(*, config: Config, entry_id: str) -> int:
    if not asyncio.run(_delete_entry(config=config, entry_id=entry_id)):
        print(f"No entry with id {entry_id}")
        return 1

    print(f"Entry deleted: {entry_id}")
    return 0
