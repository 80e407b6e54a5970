"""Tkinter application controller for Newsfeed Neon.

``NewsfeedApp`` owns the widgets and the ``ViewState``; all state changes
(key presses, timer callbacks, sync results) arrive through the Tk event loop
and are handled one at a time. Sync cycles run on worker threads managed by
``RefreshController``.

Updates: v0.1 - 2026-10-18 - Rebuilt the application window around the
article table, prompt line and sync controllers.
"""

from __future__ import annotations

import logging
import tkinter as tk
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .app.controller import AutoRefreshController, RefreshController, SelectionController
from .app.renderers.list_renderer import ListRenderer
from .app.view_state import ViewState
from .app.views.action_bar import build_action_bar
from .app.views.list_view import build_list_view
from .app.views.logs_panel import append_log_line, build_logs_panel
from .app.views.prompt_bar import build_prompt_bar, build_status_line
from .config import DEFAULT_SETTINGS
from .errors import AllFeedsFailed, FetchError, StoreWriteError, UnsupportedTimeFormat
from .main import APP_METADATA
from .models import LayoutStyle, SyncResult, SyncState, TkQueueHandler
from .settings_store import refresh_interval_ms, update_settings

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
_ROW_HEIGHT_PX = 22
_CHROME_HEIGHT_PX = 150
_RELATIVE_AGE_REFRESH_MS = 60_000


class NewsfeedApp(tk.Tk):
    """Tkinter app that lists synchronised feed articles."""

    def __init__(
        self,
        settings: Dict[str, Any],
        *,
        settings_path: Optional[Path] = None,
        layout_style: Optional[LayoutStyle] = None,
    ) -> None:
        super().__init__()
        self.settings = settings
        self._settings_path = settings_path
        self.title(APP_METADATA.name)
        self.geometry(str(settings.get("window_geometry") or DEFAULT_SETTINGS["window_geometry"]))
        self.configure(bg="black")

        self.layout_style = layout_style or LayoutStyle()
        self.view_state = ViewState()
        self.log_buffer: deque[tuple[int, str]] = deque()
        self._refresh_job: Optional[str] = None
        self._countdown_job: Optional[str] = None
        self._relative_age_job: Optional[str] = None
        self._last_refresh_time: Optional[datetime] = None
        self._next_refresh_time: Optional[datetime] = None
        self._last_geometry: Optional[str] = None

        self._install_log_handlers()

        self.prompt_var = tk.StringVar(value=self.view_state.prompt())
        self.status_var = tk.StringVar(value="Loading articles…")
        self.next_refresh_var = tk.StringVar(value="Next refresh: pending")
        self.last_refresh_var = tk.StringVar(value="Last refresh: pending")
        self.debug_var = tk.BooleanVar(value=bool(settings.get("debug_mode", False)))

        self.refresh_controller = RefreshController(self)
        self.auto_refresh_controller = AutoRefreshController(self)
        self.selection_controller = SelectionController(self)

        build_action_bar(self)
        build_prompt_bar(self)
        build_status_line(self)
        _list_frame, tree = build_list_view(self, self.layout_style)
        build_logs_panel(self)
        self.list_renderer = ListRenderer(tree)

        tree.bind("<Key>", self.selection_controller.on_key)
        tree.bind("<Double-1>", lambda _event: self.selection_controller.confirm())
        self.bind("<F5>", lambda _event: self.refresh_controller.refresh())
        self.bind("<Control-r>", lambda _event: self.refresh_controller.refresh())
        self.bind("<F2>", lambda _event: self._toggle_logs())
        self.bind("<F12>", lambda _event: self._toggle_debug_mode())
        self.bind("<Control-c>", lambda _event: self._on_close())
        self.bind("<Control-q>", lambda _event: self._on_close())
        self.bind("<Configure>", self._on_root_configure)
        self.protocol("WM_DELETE_WINDOW", self._on_close)
        tree.focus_set()

        self._update_handler_level()
        self.after(0, self.refresh_controller.refresh)
        self.after(0, self._flush_log_buffer)
        self.after(0, self.auto_refresh_controller._start_refresh_countdown)

    # Logging

    def _install_log_handlers(self) -> None:
        self.log_handler = TkQueueHandler(self._handle_log_record)
        self.log_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%H:%M:%S"))
        self.log_handler.setLevel(logging.INFO)
        self.root_logger = logging.getLogger()
        self.root_logger.setLevel(logging.DEBUG)
        for handler in list(self.root_logger.handlers):
            if isinstance(handler, TkQueueHandler):
                self.root_logger.removeHandler(handler)
        self.root_logger.addHandler(self.log_handler)
        self.console_handler = logging.StreamHandler()
        self.console_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%H:%M:%S"))
        self.console_handler.setLevel(logging.INFO)
        self.root_logger.addHandler(self.console_handler)

    def _update_handler_level(self) -> None:
        level = logging.DEBUG if bool(self.debug_var.get()) else logging.INFO
        self.log_handler.setLevel(level)
        self.console_handler.setLevel(level)

    def _toggle_debug_mode(self) -> None:
        self.debug_var.set(not bool(self.debug_var.get()))
        self.settings["debug_mode"] = bool(self.debug_var.get())
        self._update_handler_level()
        logger.info("Debug logging %s.", "enabled" if self.settings["debug_mode"] else "disabled")

    def _handle_log_record(self, level: int, message: str) -> None:
        # May be called from worker threads; the buffer is drained on the Tk thread.
        self.log_buffer.append((level, message))
        try:
            self.after(0, self._flush_log_buffer)
        except RuntimeError:
            pass

    def _flush_log_buffer(self) -> None:
        while self.log_buffer:
            _level, msg = self.log_buffer.popleft()
            append_log_line(self.log_text, msg)

    def _log_status(self, message: str, level: int = logging.INFO) -> None:
        self.status_var.set(message)
        logger.log(level, message)

    def _toggle_logs(self) -> None:
        if self.log_visible:
            self.log_frame.pack_forget()
            self.logs_toggle_btn.config(text="Show Logs")
        else:
            self.log_frame.pack(fill="both", expand=False, padx=10, pady=(0, 6))
            self.logs_toggle_btn.config(text="Hide Logs")
        self.log_visible = not self.log_visible

    # Sync results

    def _auto_refresh_interval_ms(self) -> int:
        return refresh_interval_ms(self.settings)

    def _handle_sync_result(self, result: SyncResult) -> None:
        self._last_refresh_time = datetime.now()
        self.view_state.publish(result.articles)
        self._render_articles()
        self._report_diagnostics(result)
        self._schedule_relative_age_refresh()
        self.auto_refresh_controller.schedule()

    def _handle_sync_error(self, exc: Exception) -> None:
        # Keep the current view; only the status line reports the failure.
        self._log_status(f"Refresh failed: {exc}", level=logging.ERROR)
        self.auto_refresh_controller.schedule()

    def _report_diagnostics(self, result: SyncResult) -> None:
        feed_errors = sum(isinstance(exc, FetchError) for exc in result.diagnostics)
        date_errors = sum(isinstance(exc, UnsupportedTimeFormat) for exc in result.diagnostics)
        parts = [f"{len(result.articles)} articles"]
        if result.state is SyncState.CACHE_ONLY:
            parts.append("offline, showing cache")
        else:
            parts.append(f"{result.fresh_count} fetched")
        if feed_errors:
            parts.append(f"{feed_errors} feed error(s)")
        if date_errors:
            parts.append(f"{date_errors} undated item(s) skipped")
        if not result.persisted and result.state is SyncState.SUCCESS:
            parts.append("not saved")
        self.status_var.set(" · ".join(parts))

        for exc in result.diagnostics:
            if isinstance(exc, (StoreWriteError, AllFeedsFailed)):
                logger.warning("%s", exc)

    # Rendering

    def _render_articles(self) -> None:
        now = datetime.now(timezone.utc)
        self.list_renderer.render(self.view_state.rows(now), self.layout_style)
        self._render_prompt()

    def _render_prompt(self) -> None:
        self.prompt_var.set(self.view_state.prompt())

    def _schedule_relative_age_refresh(self) -> None:
        if self._relative_age_job is not None:
            self.after_cancel(self._relative_age_job)
        self._relative_age_job = self.after(
            _RELATIVE_AGE_REFRESH_MS, self._refresh_relative_age_labels
        )

    def _refresh_relative_age_labels(self) -> None:
        self._relative_age_job = None
        self._render_articles()
        self._schedule_relative_age_refresh()

    def _on_root_configure(self, event: tk.Event) -> None:
        if event.widget is not self:
            return
        rows = max(5, (int(event.height) - _CHROME_HEIGHT_PX) // _ROW_HEIGHT_PX)
        resized = self.layout_style.resized(int(event.width), rows)
        if resized != self.layout_style:
            self.layout_style = resized
            self._render_articles()
        self._last_geometry = self.geometry()

    # Lifecycle

    def _on_close(self) -> None:
        self.auto_refresh_controller.cancel_pending_jobs()
        updates: Dict[str, Any] = {"debug_mode": bool(self.settings.get("debug_mode", False))}
        if self._last_geometry:
            self.settings["window_geometry"] = self._last_geometry
            updates["window_geometry"] = self._last_geometry
        update_settings(updates, self._settings_path)
        self.root_logger.removeHandler(self.log_handler)
        self.root_logger.removeHandler(self.console_handler)
        self.destroy()


__all__ = ["NewsfeedApp"]
