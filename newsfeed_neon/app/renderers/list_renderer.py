"""ListRenderer fills the article table and tracks its cursor.

Every ``render`` call receives the ``LayoutStyle`` to apply, so column widths
and table height always come from the caller rather than shared state.

Updates: v0.1 - 2026-10-18 - Rendered display rows into a ttk.Treeview.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import tkinter as tk
from tkinter import ttk

from ...models import DisplayRow, LayoutStyle

logger = logging.getLogger(__name__)


class ListRenderer:
    """Encapsulate table row rendering and cursor lookup."""

    def __init__(self, tree: ttk.Treeview) -> None:
        self.tree = tree

    def render(self, rows: Sequence[DisplayRow], style: LayoutStyle) -> None:
        """Replace the table contents, keeping the cursor position when possible."""
        previous = self.cursor_index()
        self._apply_style(style)

        self.tree.delete(*self.tree.get_children())
        for row in rows:
            self.tree.insert(
                "",
                "end",
                iid=str(row.position - 1),
                values=(row.position, row.source, row.relative_time, row.title),
            )

        if not rows:
            return
        target = 0 if previous is None else min(previous, len(rows) - 1)
        self.select_index(target)

    def _apply_style(self, style: LayoutStyle) -> None:
        try:
            self.tree.configure(height=style.height)
            self.tree.column("position", width=style.position_width, stretch=False)
            self.tree.column("source", width=style.source_width, stretch=False)
            self.tree.column("time", width=style.time_width, stretch=False)
            self.tree.column("title", width=style.title_width, stretch=True)
        except tk.TclError:
            logger.debug("Unable to apply layout style: %s", style)

    def cursor_index(self) -> Optional[int]:
        """Return the 0-based index of the highlighted row, if any."""
        focus = self.tree.focus()
        if not focus:
            selection = self.tree.selection()
            focus = selection[0] if selection else ""
        if not focus:
            return None
        try:
            return int(focus)
        except ValueError:
            return None

    def select_index(self, index: int) -> None:
        iid = str(index)
        if not self.tree.exists(iid):
            return
        self.tree.selection_set(iid)
        self.tree.focus(iid)
        self.tree.see(iid)


__all__ = ["ListRenderer"]
