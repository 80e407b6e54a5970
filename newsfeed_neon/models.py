"""Domain models backing the Newsfeed Neon application.

This module collects the dataclasses shared by the sync engine, the article
stores and the Tk presentation layer so each layer can import them without
dragging in the others.

Updates: v0.1 - 2026-10-18 - Introduced article, feed and sync result models.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class AppMetadata:
    name: str
    version: str
    author: str
    description: str


@dataclass(frozen=True)
class FeedDescriptor:
    source: str
    url: str

    @classmethod
    def from_dict(cls, payload: Any) -> Optional["FeedDescriptor"]:
        if not isinstance(payload, dict):
            return None
        source = payload.get("source")
        url = payload.get("url")
        if not isinstance(source, str) or not isinstance(url, str):
            return None
        if not source.strip() or not url.strip():
            return None
        return cls(source=source.strip(), url=url.strip())


@dataclass(frozen=True)
class FeedItem:
    """Raw item as returned by a feed source, before timestamp parsing."""

    title: str
    link: str
    published_raw: Optional[str] = None


@dataclass(frozen=True)
class Article:
    """A normalised feed article; ``link`` is its identity key."""

    source: str
    title: str
    published_at: datetime
    link: str

    @property
    def published_millis(self) -> int:
        return (self.published_at - _EPOCH) // timedelta(milliseconds=1)

    def as_record(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "title": self.title,
            "published_at": self.published_millis,
            "link": self.link,
        }

    @classmethod
    def from_record(cls, payload: Dict[str, Any]) -> Optional["Article"]:
        source = payload.get("source")
        title = payload.get("title")
        link = payload.get("link")
        millis = payload.get("published_at")
        if not isinstance(link, str) or not link:
            return None
        if not isinstance(millis, (int, float)):
            return None
        try:
            published_at = datetime_from_millis(int(millis))
        except (ValueError, OverflowError):
            return None
        return cls(
            source=source if isinstance(source, str) else "",
            title=title if isinstance(title, str) else "",
            published_at=published_at,
            link=link,
        )


def datetime_from_millis(millis: int) -> datetime:
    """Return an aware UTC datetime for an epoch-millisecond value."""

    return _EPOCH + timedelta(milliseconds=millis)


class SyncState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    CACHE_ONLY = "cache_only"
    FAILED = "failed"


@dataclass(frozen=True)
class SyncResult:
    """Outcome of one sync cycle delivered back to the UI thread."""

    state: SyncState
    articles: List[Article]
    diagnostics: List[Exception] = field(default_factory=list)
    persisted: bool = False
    fetched_at: Optional[datetime] = None
    fresh_count: int = 0
    cached_count: int = 0


@dataclass(frozen=True)
class DisplayRow:
    position: int
    source: str
    relative_time: str
    title: str


@dataclass(frozen=True)
class LayoutStyle:
    """Dimensions handed to every render call of the list view."""

    width: int = 1100
    height: int = 30
    position_width: int = 60
    source_width: int = 140
    time_width: int = 130
    border_color: str = "#5F87FF"

    @property
    def title_width(self) -> int:
        fixed = self.position_width + self.source_width + self.time_width
        return max(200, self.width - fixed - 24)

    def resized(self, width: int, height: int) -> "LayoutStyle":
        return replace(self, width=max(1, int(width)), height=max(1, int(height)))


class TkQueueHandler(logging.Handler):
    """Logging handler that forwards formatted records to a Tk callback."""

    def __init__(self, callback: Callable[[int, str], None]) -> None:
        super().__init__()
        self._callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            self._callback(record.levelno, message)
        except Exception:  # pragma: no cover - guard against issues
            self.handleError(record)


__all__ = [
    "AppMetadata",
    "Article",
    "DisplayRow",
    "FeedDescriptor",
    "FeedItem",
    "LayoutStyle",
    "SyncResult",
    "SyncState",
    "TkQueueHandler",
    "datetime_from_millis",
]
