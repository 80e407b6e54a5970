"""SelectionController routes keystrokes into the view state and opens articles.

Updates: v0.1 - 2026-10-18 - Replaced listbox selection handling with search,
jump and cursor selection over the article table.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from ...models import Article
from ..services import open_link

if TYPE_CHECKING:
    from ...application import NewsfeedApp

logger = logging.getLogger(__name__)

# Keys handled by the table's own class bindings (cursor movement).
NAVIGATION_KEYS = frozenset(
    {"Up", "Down", "Prior", "Next", "Home", "End", "KP_Up", "KP_Down"}
)
_CONFIRM_KEYS = frozenset({"Return", "KP_Enter"})
_CONTROL_MASK = 0x0004
_ALT_MASK = 0x0008


class SelectionController:
    """Encapsulates key input interpretation and article selection."""

    def __init__(self, app: "NewsfeedApp") -> None:
        self.app = app

    def on_key(self, event: Any) -> Optional[str]:
        """Handle a key press on the article table.

        Returns ``"break"`` for keys consumed here so Tk stops propagating
        them; navigation keys fall through to the table.
        """
        keysym = getattr(event, "keysym", "")
        char = getattr(event, "char", "") or ""
        state = int(getattr(event, "state", 0) or 0)

        if keysym in NAVIGATION_KEYS:
            return None
        if keysym in _CONFIRM_KEYS:
            self.confirm()
            return "break"
        if keysym == "Escape":
            self.app.view_state.cancel()
            self.app._render_articles()
            return "break"
        if keysym == "BackSpace":
            self.app.view_state.backspace()
            self.app._render_articles()
            return "break"
        if state & (_CONTROL_MASK | _ALT_MASK):
            return None
        if len(char) != 1 or not char.isprintable():
            return None

        searching = self.app.view_state.search_active
        self.app.view_state.type_char(char)
        if searching or self.app.view_state.search_active:
            self.app._render_articles()
        else:
            self.app._render_prompt()
        return "break"

    def confirm(self) -> Optional[Article]:
        """Resolve the jump target or highlighted row and open it."""
        cursor = self.app.list_renderer.cursor_index()
        article = self.app.view_state.confirm(cursor)
        self.app._render_prompt()
        if article is None:
            return None
        self.open_article(article)
        return article

    def open_article(self, article: Article) -> None:
        logger.info("Opening %s", article.link)
        if not open_link(article.link):
            self.app._log_status(f"Unable to open {article.link}", logging.WARNING)


__all__ = ["NAVIGATION_KEYS", "SelectionController"]
