"""Recency ordering for article collections."""

from __future__ import annotations

from typing import Iterable, List

from ..models import Article


def sort_articles_desc(articles: Iterable[Article]) -> List[Article]:
    """Return a new list ordered by ``published_at``, newest first.

    The relative order of articles sharing the same instant is unspecified.
    """
    return sorted(articles, key=lambda article: article.published_at, reverse=True)


__all__ = ["sort_articles_desc"]
