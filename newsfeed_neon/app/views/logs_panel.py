from __future__ import annotations

import tkinter as tk
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from ...application import NewsfeedApp

MAX_LOG_LINES = 500


def build_logs_panel(app: "NewsfeedApp") -> Tuple[tk.Frame, tk.Text]:
    """Create the hidden diagnostics panel (frame, scrollbar, text).

    The frame is not packed; ``NewsfeedApp._toggle_logs`` shows it below the
    article table on demand.
    """
    log_frame = tk.Frame(app, bg="black")

    log_scroll = tk.Scrollbar(log_frame)
    log_scroll.pack(side="right", fill="y")

    log_text = tk.Text(
        log_frame,
        wrap="word",
        bg="#101010",
        fg="lightgray",
        height=8,
        state="disabled",
        yscrollcommand=log_scroll.set,
        font=("Consolas", 10),
    )
    log_text.pack(fill="both", expand=True)
    log_scroll.config(command=log_text.yview)

    app.log_visible = False
    app.log_frame = log_frame
    app.log_text = log_text

    return log_frame, log_text


def append_log_line(log_text: tk.Text, message: str) -> None:
    """Append a line to the panel, keeping only the newest ``MAX_LOG_LINES``."""
    log_text.config(state="normal")
    log_text.insert(tk.END, message + "\n")
    line_count = int(log_text.index("end-1c").split(".")[0])
    if line_count > MAX_LOG_LINES:
        log_text.delete("1.0", f"{line_count - MAX_LOG_LINES}.0")
    log_text.see(tk.END)
    log_text.config(state="disabled")


__all__ = ["MAX_LOG_LINES", "append_log_line", "build_logs_panel"]
