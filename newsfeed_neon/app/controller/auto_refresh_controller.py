"""Auto refresh controller for Newsfeed Neon.

The next cycle is armed through ``after`` once the previous one has been
handled, so the refresh loop never recurses.

Updates: v0.1 - 2026-10-18 - Fixed-cadence scheduling for sync cycles.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...application import NewsfeedApp

logger = logging.getLogger(__name__)


class AutoRefreshController:
    """Manages auto refresh timing and countdown for the Tkinter app."""

    def __init__(self, app: "NewsfeedApp") -> None:
        self.app = app

    def cancel_pending_jobs(self) -> None:
        """Cancel scheduled refresh and countdown jobs if present."""
        refresh_job = getattr(self.app, "_refresh_job", None)
        if refresh_job is not None:
            self.app.after_cancel(refresh_job)
            self.app._refresh_job = None

        countdown_job = getattr(self.app, "_countdown_job", None)
        if countdown_job is not None:
            self.app.after_cancel(countdown_job)
            self.app._countdown_job = None

    def schedule(self) -> None:
        """Schedule the next sync cycle one interval from now."""
        self.cancel_pending_jobs()
        interval_ms = self.app._auto_refresh_interval_ms()
        self.app._next_refresh_time = datetime.now() + timedelta(milliseconds=interval_ms)
        self.app._refresh_job = self.app.after(interval_ms, self._auto_refresh_trigger)
        logger.debug("Next sync cycle in %d ms", interval_ms)
        self._start_refresh_countdown()

    def _auto_refresh_trigger(self) -> None:
        self.app._refresh_job = None
        self.app.refresh_controller.refresh()

    def _start_refresh_countdown(self) -> None:
        countdown_job = getattr(self.app, "_countdown_job", None)
        if countdown_job is not None:
            self.app.after_cancel(countdown_job)
        self.app._countdown_job = self.app.after(0, self._tick_refresh_countdown)

    def _update_last_refresh_label(self) -> None:
        last = getattr(self.app, "_last_refresh_time", None)
        if last is None:
            self.app.last_refresh_var.set("Last refresh: pending")
            return

        elapsed = datetime.now() - last
        seconds = max(0, int(elapsed.total_seconds()))
        if seconds < 60:
            label = f"{seconds}s ago"
        elif seconds < 3600:
            minutes, sec = divmod(seconds, 60)
            label = f"{minutes}m {sec:02d}s ago"
        else:
            hours, rem = divmod(seconds, 3600)
            minutes, sec = divmod(rem, 60)
            label = f"{hours}h {minutes:02d}m {sec:02d}s ago"

        self.app.last_refresh_var.set(f"Last refresh: {label}")

    def _tick_refresh_countdown(self) -> None:
        """Update the 'next refresh' countdown every second."""
        next_time = getattr(self.app, "_next_refresh_time", None)
        if self.app.refresh_controller.in_flight:
            self.app.next_refresh_var.set("Refreshing…")
        elif next_time is None:
            self.app.next_refresh_var.set("Next refresh: pending")
        else:
            remaining = int((next_time - datetime.now()).total_seconds())
            if remaining <= 0:
                self.app.next_refresh_var.set("Next refresh: 00:00")
            else:
                minutes, seconds = divmod(remaining, 60)
                self.app.next_refresh_var.set(f"Next refresh: {minutes:02d}:{seconds:02d}")

        self._update_last_refresh_label()
        self.app._countdown_job = self.app.after(1000, self._tick_refresh_countdown)


__all__ = ["AutoRefreshController"]
