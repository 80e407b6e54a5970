"""Exception taxonomy for feed synchronisation.

Per-item and per-feed errors are collected as diagnostics by the sync cycle;
store errors are raised to the caller.
"""

from __future__ import annotations

from typing import Optional, Sequence


class NewsfeedError(Exception):
    """Base class for Newsfeed Neon errors."""


class UnsupportedTimeFormat(NewsfeedError):
    def __init__(self, raw: str, *, title: Optional[str] = None, source: Optional[str] = None) -> None:
        self.raw = raw
        self.title = title
        self.source = source
        if title is not None:
            message = f"unsupported date format {raw!r} for {title!r} from {source}"
        else:
            message = f"unsupported date format: {raw!r}"
        super().__init__(message)


class FetchError(NewsfeedError):
    def __init__(self, url: str, reason: str, *, source: Optional[str] = None) -> None:
        self.url = url
        self.reason = reason
        self.source = source
        label = f"{source} ({url})" if source else url
        super().__init__(f"fetching {label}: {reason}")


class StoreError(NewsfeedError):
    """Raised by article stores."""


class StoreReadError(StoreError):
    pass


class StoreWriteError(StoreError):
    pass


class AllFeedsFailed(NewsfeedError):
    def __init__(self, errors: Sequence[Exception]) -> None:
        self.errors = list(errors)
        super().__init__(f"all feeds failed ({len(self.errors)} error(s))")


__all__ = [
    "AllFeedsFailed",
    "FetchError",
    "NewsfeedError",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    "UnsupportedTimeFormat",
]
