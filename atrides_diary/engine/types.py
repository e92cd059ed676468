from dataclasses import dataclass
from datetime import datetime
from typing import Final


DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_DATE_FORMAT: Final[str] = "%d/%m/%Y %H:%M"
DEFAULT_PREVIEW_CHARS: Final[int] = 80


@dataclass(frozen=True)
class DiaryEntry:
    id: str
    title: str
    content: str
    date: datetime


@dataclass
class Config:
    data_dir: str | None = None
    strict: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    date_format: str = DEFAULT_DATE_FORMAT
    preview_chars: int = DEFAULT_PREVIEW_CHARS
