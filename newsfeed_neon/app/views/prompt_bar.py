"""Prompt line builder: input buffer with mode indicator, and the status line."""

from __future__ import annotations

import tkinter as tk
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...application import NewsfeedApp

HINT_TEXT = "/ search · digits + Enter jump · Enter open · Esc cancel · F5 refresh · F2 logs"


def build_prompt_bar(app: "NewsfeedApp") -> tk.Frame:
    """Construct the prompt row showing the pending input and a key hint."""
    frame = tk.Frame(app, bg="black")
    frame.pack(fill="x", padx=10, pady=(8, 0))

    app.prompt_label = tk.Label(
        frame,
        textvariable=app.prompt_var,
        bg="black",
        fg="#FFD60A",
        font=("Consolas", 12, "bold"),
        anchor="w",
    )
    app.prompt_label.pack(side="left")

    hint_label = tk.Label(frame, text=HINT_TEXT, bg="black", fg="#6C6C6C", anchor="e")
    hint_label.pack(side="right")

    return frame


def build_status_line(app: "NewsfeedApp") -> tk.Label:
    """Create the bottom status label bound to ``app.status_var``."""
    status_label = tk.Label(
        app,
        textvariable=app.status_var,
        bg="black",
        fg="lightgray",
        anchor="w",
    )
    status_label.pack(fill="x", side="bottom", padx=10, pady=(0, 6))
    app.status_label = status_label
    return status_label


__all__ = ["HINT_TEXT", "build_prompt_bar", "build_status_line"]
