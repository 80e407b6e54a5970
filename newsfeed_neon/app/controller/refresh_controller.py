"""Refresh controller: runs sync cycles off the Tk thread.

Updates: v0.1 - 2026-10-18 - Reworked the headline refresh workflow around
sync cycles and single-flight execution.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from ...http_client import release_thread_session
from ...models import SyncResult
from ..services import run_sync_cycle

if TYPE_CHECKING:
    from ...application import NewsfeedApp

logger = logging.getLogger(__name__)


class RefreshController:
    """Manage the sync lifecycle and delegate UI updates to the app.

    Responsibilities:
    - Spawn a background worker for the network/store cycle.
    - Hand results and errors back to the Tk thread through ``after(0, ...)``.
    - Keep at most one cycle in flight.
    """

    def __init__(self, app: "NewsfeedApp") -> None:
        self.app = app
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def refresh(self) -> None:
        """Kick off a sync cycle in a background thread."""
        if self._in_flight:
            logger.debug("Refresh requested while a cycle is running; ignoring.")
            return
        self._in_flight = True
        self.app._log_status("Refreshing feeds…")
        self.app.next_refresh_var.set("Refreshing…")

        threading.Thread(target=self._worker, daemon=True).start()

    def _worker(self) -> None:
        """Run the sync cycle in a thread, then callback on the UI thread."""
        logger.info("Starting sync cycle")
        try:
            result = run_sync_cycle()
        except Exception as exc:
            logger.exception("Sync cycle aborted:")
            self.app.after(0, lambda error=exc: self._handle_error(error))
            return
        finally:
            release_thread_session()

        self.app.after(0, lambda: self._handle_result(result))

    def _handle_result(self, result: SyncResult) -> None:
        self._in_flight = False
        self.app._handle_sync_result(result)

    def _handle_error(self, exc: Exception) -> None:
        self._in_flight = False
        self.app._handle_sync_error(exc)


__all__ = ["RefreshController"]
