"""Interactive view state: displayed articles, search and jump input.

Keystrokes are interpreted in one of two modes:

- search mode, entered with ``/`` and left with cancel; the buffer after the
  ``/`` narrows ``displayed_articles`` by title on every keystroke;
- jump mode (default), where only digits are accepted and confirming ``n``
  resolves the ``n``-th displayed article.

Selection always resolves against ``displayed_articles`` so it matches what
the user sees.

Updates: v0.1 - 2026-10-18 - Introduced view state for search and jump input.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from ..models import Article, DisplayRow
from .filtering import filter_by_title
from .rendering import article_rows

logger = logging.getLogger(__name__)

SEARCH_TRIGGER = "/"


class ViewState:
    """Holds all and displayed articles plus the pending input buffer."""

    def __init__(self, articles: Iterable[Article] = ()) -> None:
        self.all_articles: List[Article] = list(articles)
        self.displayed_articles: Sequence[Article] = self.all_articles
        self.search_active = False
        self.pending_input = ""

    @property
    def query(self) -> str:
        if not self.search_active:
            return ""
        return self.pending_input[len(SEARCH_TRIGGER):]

    @property
    def mode(self) -> str:
        return "search" if self.search_active else "jump"

    def publish(self, articles: Iterable[Article]) -> None:
        """Replace all articles and reapply the active search, if any."""
        self.all_articles = list(articles)
        self._apply_filter()

    def type_char(self, char: str) -> None:
        """Feed one printable keystroke into the input buffer."""
        if not char:
            return
        if self.search_active:
            self.pending_input += char
            self._apply_filter()
            return
        if char == SEARCH_TRIGGER:
            self.search_active = True
            self.pending_input = SEARCH_TRIGGER
            self._apply_filter()
            return
        if char.isascii() and char.isdigit():
            self.pending_input += char
            return
        if self.pending_input:
            logger.debug("Discarding jump input %r after non-numeric key.", self.pending_input)
        self.pending_input = ""

    def backspace(self) -> None:
        if not self.pending_input:
            return
        self.pending_input = self.pending_input[:-1]
        if self.search_active and not self.pending_input:
            self.search_active = False
        self._apply_filter()

    def cancel(self) -> None:
        """Leave search mode, restore the full list and clear the buffer."""
        self.search_active = False
        self.pending_input = ""
        self._apply_filter()

    def confirm(self, cursor: Optional[int] = None) -> Optional[Article]:
        """Resolve the article to open, or ``None`` when nothing applies.

        A numeric buffer ``n`` resolves ``displayed_articles[n - 1]`` when in
        range and clears the buffer; out-of-range values are a no-op. With no
        jump input the highlighted ``cursor`` row is resolved instead.
        """
        if self.pending_input and not self.search_active:
            position = int(self.pending_input)
            if 1 <= position <= len(self.displayed_articles):
                self.pending_input = ""
                return self.displayed_articles[position - 1]
            logger.debug(
                "Jump target %d outside 1..%d; ignoring.",
                position,
                len(self.displayed_articles),
            )
            return None
        return self.article_at(cursor)

    def article_at(self, index: Optional[int]) -> Optional[Article]:
        if index is None or not 0 <= index < len(self.displayed_articles):
            return None
        return self.displayed_articles[index]

    def rows(self, now_utc: Optional[datetime] = None) -> List[DisplayRow]:
        return article_rows(self.displayed_articles, now_utc)

    def prompt(self) -> str:
        """Prompt line for the display: mode indicator plus the buffer."""
        return f"{self.mode.upper()} > {self.pending_input}"

    def _apply_filter(self) -> None:
        self.displayed_articles = filter_by_title(self.all_articles, self.query)


__all__ = ["SEARCH_TRIGGER", "ViewState"]
