"""Configuration primitives and static defaults for Newsfeed Neon.

This module centralises application constants, default settings, storage
locations and network options so other layers can import them without side
effects beyond loading a local ``.env`` file.

Updates: v0.1 - 2026-10-18 - Adapted configuration layer for feed sync,
article stores and config/cache directories.
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any, Dict, Mapping

from dotenv import load_dotenv

load_dotenv()

APP_DIR_NAME = "newsfeed-neon"

# --- Feed fetching -----------------------------------------------------------------------------

USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36 newsfeed-neon"
)

try:
    REQUEST_TIMEOUT_SECONDS = max(1.0, float(os.getenv("NEWSFEED_TIMEOUT", "15")))
except ValueError:
    REQUEST_TIMEOUT_SECONDS = 15.0


# --- Refresh cadence ---------------------------------------------------------------------------

DEFAULT_REFRESH_MINUTES = 15
MIN_REFRESH_MINUTES = 1


# --- Config and cache locations ----------------------------------------------------------------

_LOCAL_APPDATA = os.getenv("LOCALAPPDATA")
_XDG_CONFIG_HOME = os.getenv("XDG_CONFIG_HOME")
_XDG_CACHE_HOME = os.getenv("XDG_CACHE_HOME")

if os.name == "nt":
    _base_dir = (
        Path(_LOCAL_APPDATA)
        if _LOCAL_APPDATA
        else Path.home() / "AppData" / "Local"
    )
    CONFIG_DIR = _base_dir / "NewsfeedNeon"
    CACHE_DIR = _base_dir / "NewsfeedNeon" / "cache"
else:
    CONFIG_DIR = (
        Path(_XDG_CONFIG_HOME) if _XDG_CONFIG_HOME else Path.home() / ".config"
    ) / APP_DIR_NAME
    CACHE_DIR = (
        Path(_XDG_CACHE_HOME) if _XDG_CACHE_HOME else Path.home() / ".cache"
    ) / APP_DIR_NAME

CONFIG_PATH = Path(os.getenv("NEWSFEED_CONFIG", str(CONFIG_DIR / "config.json")))
DB_PATH = Path(os.getenv("NEWSFEED_DB", str(CACHE_DIR / "data.db")))


# --- Redis article store -----------------------------------------------------------------------

REDIS_URL = os.getenv("REDIS_URL")
REDIS_KEY_PREFIX = os.getenv("NEWSFEED_REDIS_PREFIX", "newsfeed:articles")


# --- Settings persisted alongside the feed list ------------------------------------------------

DEFAULT_SETTINGS: Dict[str, Any] = {
    "rss_feeds": [],
    "refresh_minutes": DEFAULT_REFRESH_MINUTES,
    "request_timeout": REQUEST_TIMEOUT_SECONDS,
    "window_geometry": "1100x640",
    "debug_mode": False,
}


def merge_settings(overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Apply overrides on top of the default settings."""

    merged = copy.deepcopy(DEFAULT_SETTINGS)
    merged.update({key: value for key, value in overrides.items() if key in merged})
    return merged


__all__ = [
    "APP_DIR_NAME",
    "CACHE_DIR",
    "CONFIG_DIR",
    "CONFIG_PATH",
    "DB_PATH",
    "DEFAULT_REFRESH_MINUTES",
    "DEFAULT_SETTINGS",
    "MIN_REFRESH_MINUTES",
    "REDIS_KEY_PREFIX",
    "REDIS_URL",
    "REQUEST_TIMEOUT_SECONDS",
    "USER_AGENT",
    "merge_settings",
]
