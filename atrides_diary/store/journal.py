from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import os
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterable

from atrides_diary.engine.types import DiaryEntry
from atrides_diary.store.errors import DecodeError, DocumentError
from atrides_diary.store.paths import storage_path


logger = logging.getLogger(__name__)

ENTRY_FIELDS = ("id", "title", "content", "date")


def format_timestamp(dt: datetime) -> str:
    # Millisecond precision unless the value carries finer digits; those are kept
    # so that parse(format(dt)) == dt.
    timespec = "milliseconds" if dt.microsecond % 1000 == 0 else "microseconds"
    text = dt.isoformat(timespec=timespec)
    if dt.utcoffset() == timedelta(0):
        text = text.removesuffix("+00:00") + "Z"
    return text


def parse_timestamp(text: str) -> datetime:
    return datetime.fromisoformat(text)


def encode_entry(entry: DiaryEntry) -> dict:
    return {
        "id": entry.id,
        "title": entry.title,
        "content": entry.content,
        "date": format_timestamp(entry.date),
    }


def _require_str(raw: dict, field: str, index: int | None) -> str:
    if field not in raw:
        raise DecodeError(field, "missing", index=index)
    value = raw[field]
    if not isinstance(value, str):
        raise DecodeError(field, f"expected string, got {type(value).__name__}", index=index)
    return value


def decode_entry(raw: object, *, index: int | None = None) -> DiaryEntry:
    """Build an entry from its stored document.

    Extra keys are ignored. Nothing is defaulted: a missing ``id`` is an error.

    Raises:
        DecodeError: the document is not an object, or a field is missing or malformed.
    """
    if not isinstance(raw, dict):
        raise DecodeError(None, f"expected object, got {type(raw).__name__}", index=index)

    values = {field: _require_str(raw, field, index) for field in ENTRY_FIELDS}

    try:
        when = parse_timestamp(values["date"])
    except ValueError as e:
        raise DecodeError(
            "date", f"not an ISO-8601 timestamp: {values['date']!r}", index=index
        ) from e

    return DiaryEntry(id=values["id"], title=values["title"], content=values["content"], date=when)


def _read_entries(path: Path) -> list[DiaryEntry]:
    if not path.exists():
        return []

    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return []

    try:
        raw = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        # Deeply nested input exhausts the decoder stack before it errors.
        raise DocumentError(f"malformed JSON: {e}") from e

    if not isinstance(raw, list):
        raise DocumentError(f"expected a JSON array, got {type(raw).__name__}")

    return [decode_entry(item, index=i) for i, item in enumerate(raw)]


def load_all(path: Path | None = None, *, strict: bool = False) -> list[DiaryEntry]:
    """Load every stored entry, in stored order.

    An absent or empty file means no entries. Any other failure loads nothing:
    the problem is logged and an empty list returned, unless ``strict`` is set,
    in which case the error propagates.
    """

    target = path or storage_path()

    try:
        entries = _read_entries(target)
    except (OSError, UnicodeDecodeError, DocumentError, DecodeError) as e:
        if strict:
            raise
        logger.warning("Error loading diary entries from %s: %s", target, e)
        return []

    logger.debug("Loaded %d diary entries from %s", len(entries), target)
    return entries


def _write_atomic(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")

    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            f.write(text)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp_path, path)
    except (OSError, UnicodeEncodeError):
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        raise


def save_all(entries: Iterable[DiaryEntry], path: Path | None = None, *, strict: bool = False) -> bool:
    """Replace the stored collection with ``entries``, in the given order.

    Returns False when the write failed; the failure is logged rather than
    raised unless ``strict`` is set.
    """

    target = path or storage_path()
    payload = [encode_entry(entry) for entry in entries]
    text = json.dumps(payload, ensure_ascii=False, indent=2)

    try:
        _write_atomic(target, text)
    except (OSError, UnicodeEncodeError) as e:
        if strict:
            raise
        logger.warning("Error saving diary entries to %s: %s", target, e)
        return False

    logger.debug("Saved %d diary entries to %s", len(payload), target)
    return True


async def aload_all(path: Path | None = None, *, strict: bool = False) -> list[DiaryEntry]:
    return await asyncio.to_thread(load_all, path, strict=strict)


async def asave_all(
    entries: Iterable[DiaryEntry], path: Path | None = None, *, strict: bool = False
) -> bool:
    # Snapshot before handing off so later mutations by the caller are not seen.
    return await asyncio.to_thread(save_all, list(entries), path, strict=strict)
