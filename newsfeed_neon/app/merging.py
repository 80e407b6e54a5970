"""Link-keyed merging of article collections.

Updates: v0.1 - 2026-10-18 - Added fresh/cached article merge.
"""

from __future__ import annotations

from typing import Iterable, List, Set

from ..models import Article


def merge_articles(primary: Iterable[Article], secondary: Iterable[Article]) -> List[Article]:
    """Combine two collections, keeping the first article seen for each link.

    Every article of ``primary`` comes first in its original order, followed
    by the ``secondary`` articles whose link was not seen yet. On a link
    collision the ``primary`` article is kept as-is.
    """
    seen: Set[str] = set()
    merged: List[Article] = []
    for collection in (primary, secondary):
        for article in collection:
            if article.link in seen:
                continue
            seen.add(article.link)
            merged.append(article)
    return merged


__all__ = ["merge_articles"]
