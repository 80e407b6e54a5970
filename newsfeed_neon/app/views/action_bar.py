"""Action bar builder for the NewsfeedApp main window.

Updates: v0.1 - 2026-10-18 - Trimmed to refresh, log toggle, exit and
refresh status labels.
"""

from __future__ import annotations

import tkinter as tk
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # Avoid circular import at runtime
    from ...application import NewsfeedApp


def build_action_bar(app: "NewsfeedApp") -> tk.Frame:
    """Create and wire the top action bar for the main window.

    The builder attaches created widgets back on the app instance so status
    updates can reach them. Commands are delegated to controllers.
    """
    action_bar = tk.Frame(app, bg="black")
    action_bar.pack(fill="x", padx=10, pady=(10, 0))
    app.action_bar = action_bar

    app.action_refresh_btn = tk.Button(
        action_bar,
        text="Refresh",
        command=app.refresh_controller.refresh,
    )
    app.action_refresh_btn.pack(side="left")

    app.logs_toggle_btn = tk.Button(
        action_bar,
        text="Show Logs",
        command=app._toggle_logs,
    )
    app.logs_toggle_btn.pack(side="left", padx=(10, 0))

    right_action_cluster = tk.Frame(action_bar, bg="black")
    right_action_cluster.pack(side="right")

    app.exit_btn = tk.Button(right_action_cluster, text="Exit", command=app._on_close)
    app.exit_btn.pack(side="right", padx=(10, 0))

    for variable in (app.next_refresh_var, app.last_refresh_var):
        tk.Label(
            right_action_cluster,
            textvariable=variable,
            bg="black",
            fg="#89CFF0",
            font=("Segoe UI", 10, "italic"),
        ).pack(side="right", padx=(10, 0))

    return action_bar


__all__ = ["build_action_bar"]
