"""Title search filtering for the displayed article list.

Updates: v0.1 - 2026-10-18 - Replaced exclusion filtering with title search.
"""

from __future__ import annotations

from typing import List, Sequence

from ..models import Article


def filter_by_title(articles: Sequence[Article], query: str) -> Sequence[Article]:
    """Return articles whose title contains ``query``, ignoring case.

    An empty query returns ``articles`` itself; otherwise a new list keeps the
    matching articles in their original relative order.
    """
    if not query:
        return articles

    needle = query.casefold()
    filtered: List[Article] = []
    for article in articles:
        if needle in article.title.casefold():
            filtered.append(article)
    return filtered


__all__ = ["filter_by_title"]
