from __future__ import annotations


class StoreError(Exception):
    """Base class for problems with the stored diary document."""


class DecodeError(StoreError):
    """A stored entry does not have the expected shape."""

    def __init__(self, field: str | None, reason: str, *, index: int | None = None):
        self.field = field
        self.reason = reason
        self.index = index

        where = f"entry {index}" if index is not None else "entry"
        if field is not None:
            where = f"{where} field {field!r}"
        super().__init__(f"{where}: {reason}")


class DocumentError(StoreError):
    """The storage file is not a JSON array."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
