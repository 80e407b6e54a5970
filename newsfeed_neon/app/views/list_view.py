from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Tuple

from ...models import LayoutStyle

COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("position", "#"),
    ("source", "Source"),
    ("time", "Date"),
    ("title", "Title"),
)


def build_list_view(app: tk.Tk, style: LayoutStyle) -> Tuple[tk.Frame, ttk.Treeview]:
    """Build the article table (frame, scrollbar, treeview) and attach to app.

    The frame border uses ``style.border_color``; column widths are applied on
    every render by the list renderer.

    Returns:
        Tuple[tk.Frame, ttk.Treeview]: (list_frame, tree) created widgets.
    """
    list_frame = tk.Frame(
        app,
        name="list",
        bg="black",
        highlightthickness=1,
        highlightbackground=style.border_color,
    )
    list_frame.pack(fill="both", expand=True, padx=10, pady=5)

    ttk_style = ttk.Style(app)
    ttk_style.configure(
        "Articles.Treeview",
        background="#101010",
        fieldbackground="#101010",
        foreground="#FFFFFF",
        rowheight=22,
    )
    ttk_style.configure("Articles.Treeview.Heading", background="#1F1F1F", foreground="#B0B0B0")
    ttk_style.map(
        "Articles.Treeview",
        background=[("selected", "#5F00D7")],
        foreground=[("selected", "#FFFFAF")],
    )

    scrollbar = tk.Scrollbar(list_frame)
    scrollbar.pack(side="right", fill="y")

    tree = ttk.Treeview(
        list_frame,
        columns=[name for name, _ in COLUMNS],
        show="headings",
        selectmode="browse",
        style="Articles.Treeview",
        height=style.height,
    )
    for name, heading in COLUMNS:
        tree.heading(name, text=heading, anchor="w")
        tree.column(name, anchor="e" if name == "position" else "w")
    tree.pack(fill="both", expand=True)
    tree.configure(yscrollcommand=scrollbar.set)
    scrollbar.config(command=tree.yview)

    setattr(app, "list_frame", list_frame)
    setattr(app, "article_tree", tree)

    return list_frame, tree
