from datetime import datetime
from typing import Iterable, Iterator, List

from .types import DiaryEntry


def new_entry_id(now: datetime) -> str:
    # Milliseconds since the epoch. Two adds within the same millisecond collide;
    # callers that need more must pass distinct timestamps.
    return str(int(now.timestamp() * 1000))


class EntryBook:
    """Newest-first list of entries owned by the presentation layer.

    The persistence functions only ever see a snapshot of ``entries``; nothing in
    the store keeps a reference to the book.
    """

    def __init__(self, entries: Iterable[DiaryEntry] | None = None):
        self._entries: List[DiaryEntry] = list(entries or [])

    @property
    def entries(self) -> tuple[DiaryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DiaryEntry]:
        return iter(self._entries)

    def get(self, entry_id: str) -> DiaryEntry | None:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def add(self, title: str, content: str, *, now: datetime | None = None) -> DiaryEntry:
        """Create an entry and insert it at the head.

        Raises:
            ValueError: title or content is empty.
        """
        if not title.strip() or not content.strip():
            raise ValueError("Title and content must not be empty")

        when = now or datetime.now()
        entry = DiaryEntry(id=new_entry_id(when), title=title, content=content, date=when)
        self._entries.insert(0, entry)
        return entry

    def delete(self, entry_id: str) -> bool:
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.id != entry_id]
        return len(self._entries) != before
