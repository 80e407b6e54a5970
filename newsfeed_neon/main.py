"""Application entrypoint wiring for Newsfeed Neon.

Builds the article store, feed source and sync orchestrator, injects them
into the late-bound application services, and starts the Tk main loop.

Updates: v0.1 - 2026-10-18 - Wired the sync orchestrator and article store
into the Tk application.
"""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from .app import actions
from .app.services import configure_app_services
from .app.sync import SyncOrchestrator
from .config import CONFIG_PATH, REQUEST_TIMEOUT_SECONDS
from .feeds import FeedSource
from .models import AppMetadata
from .settings_store import feeds_from_settings, load_settings
from .store import create_article_store

logger = logging.getLogger(__name__)

APP_VERSION = "0.1"
APP_METADATA = AppMetadata(
    name="Newsfeed Neon",
    version=f"v{APP_VERSION}",
    author="Newsfeed Neon contributors",
    description=(
        "Tkinter desktop reader that syncs RSS/Atom feeds into a local article "
        "cache with search and numeric jump navigation."
    ),
)


def build_orchestrator(settings_path: Path) -> SyncOrchestrator:
    """Create a sync orchestrator that re-reads the feed list every cycle."""

    settings = load_settings(settings_path)
    try:
        timeout = max(1.0, float(settings.get("request_timeout", REQUEST_TIMEOUT_SECONDS)))
    except (TypeError, ValueError):
        timeout = REQUEST_TIMEOUT_SECONDS
    return SyncOrchestrator(
        create_article_store(),
        FeedSource(timeout=timeout),
        lambda: feeds_from_settings(load_settings(settings_path)),
    )


def main(settings_path: Optional[str] = None) -> None:
    """Launch the Newsfeed Neon Tk application."""

    logger.debug("Bootstrapping Newsfeed Neon main loop")

    path = Path(settings_path) if settings_path else CONFIG_PATH
    settings = load_settings(path)
    if not feeds_from_settings(settings):
        logger.warning(
            "No feeds configured; add entries to 'rss_feeds' in %s. Showing cached articles only.",
            path,
        )

    orchestrator = build_orchestrator(path)
    configure_app_services(
        run_sync_cycle=orchestrator.run_cycle,
        open_link=actions.open_link,
    )

    application = importlib.import_module("newsfeed_neon.application")
    app = application.NewsfeedApp(settings, settings_path=path)
    app.mainloop()


__all__ = ["APP_METADATA", "APP_VERSION", "build_orchestrator", "main"]
