"""Selection actions triggered from the article list.

Updates: v0.1 - 2026-10-18 - Replaced mute helpers with the open-link action.
"""

from __future__ import annotations

import logging
import webbrowser

logger = logging.getLogger(__name__)


def open_link(url: str) -> bool:
    """Open ``url`` in the default browser; returns whether a browser accepted it."""
    if not isinstance(url, str) or not url.strip():
        return False
    try:
        opened = webbrowser.open(url.strip(), new=2)
    except webbrowser.Error as exc:
        logger.warning("Unable to open %s: %s", url, exc)
        return False
    if not opened:
        logger.warning("No browser available to open %s", url)
    return bool(opened)


__all__ = ["open_link"]
