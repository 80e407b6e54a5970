"""Persistent settings helpers for the Newsfeed Neon application.

The configuration file holds the feed list (``rss_feeds``) alongside a few
user preferences. A missing file is created with defaults on first load so
users have a template to fill in.

Updates: v0.1 - 2026-10-18 - Added feed list parsing and default file creation.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import (
    CONFIG_PATH,
    DEFAULT_SETTINGS,
    MIN_REFRESH_MINUTES,
    merge_settings,
)
from .models import FeedDescriptor

logger = logging.getLogger(__name__)


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load application settings from disk, falling back to defaults."""

    target = Path(path) if path is not None else CONFIG_PATH
    if not target.exists():
        settings = merge_settings({})
        logger.info("No config file at %s; writing defaults.", target)
        save_settings(settings, target)
        return settings

    try:
        with target.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except Exception as exc:  # pragma: no cover - IO issues
        logger.warning("Unable to load settings from %s: %s", target, exc)
        return merge_settings({})
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a JSON object; using defaults.", target)
        return merge_settings({})
    return merge_settings(data)


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """Persist application settings to disk."""

    target = Path(path) if path is not None else CONFIG_PATH
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as handle:
            json.dump(settings, handle, indent=2)
    except Exception as exc:  # pragma: no cover - IO issues
        logger.warning("Unable to save settings to %s: %s", target, exc)


def update_settings(updates: Dict[str, Any], path: Optional[Path] = None) -> None:
    """Write ``updates`` into the stored file, keeping every other key as found.

    The feed list may be edited while the app runs, so the file on disk is
    re-read rather than overwritten with the in-memory copy. An unreadable file
    is left untouched.
    """

    target = Path(path) if path is not None else CONFIG_PATH
    stored: Dict[str, Any]
    if target.exists():
        try:
            with target.open("r", encoding="utf-8") as handle:
                stored = json.load(handle)
        except (OSError, ValueError) as exc:
            logger.warning("Not updating %s; unable to read it: %s", target, exc)
            return
        if not isinstance(stored, dict):
            logger.warning("Not updating %s; it is not a JSON object.", target)
            return
    else:
        stored = merge_settings({})
    stored.update(updates)
    save_settings(stored, target)


def feeds_from_settings(settings: Dict[str, Any]) -> List[FeedDescriptor]:
    """Return the configured feeds, skipping malformed entries."""

    raw_feeds = settings.get("rss_feeds")
    if not isinstance(raw_feeds, list):
        return []
    feeds: List[FeedDescriptor] = []
    for entry in raw_feeds:
        feed = FeedDescriptor.from_dict(entry)
        if feed is None:
            logger.warning("Ignoring malformed feed entry: %r", entry)
            continue
        feeds.append(feed)
    return feeds


def refresh_interval_ms(settings: Dict[str, Any]) -> int:
    """Return the auto refresh interval in milliseconds."""

    try:
        minutes = int(settings.get("refresh_minutes", DEFAULT_SETTINGS["refresh_minutes"]))
    except (TypeError, ValueError):
        minutes = int(DEFAULT_SETTINGS["refresh_minutes"])
    return max(MIN_REFRESH_MINUTES, minutes) * 60_000


__all__ = [
    "feeds_from_settings",
    "load_settings",
    "refresh_interval_ms",
    "save_settings",
    "update_settings",
]
