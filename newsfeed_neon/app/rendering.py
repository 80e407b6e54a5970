"""Rendering helpers for relative age labels and display rows.

Updates: v0.1 - 2026-10-18 - Reworked age helpers around article rows.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from ..models import Article, DisplayRow


def article_age_minutes(article: Article, now_utc: datetime) -> float:
    """Compute age in minutes from ``published_at``; future dates count as 0."""
    delta = now_utc - article.published_at
    minutes = delta.total_seconds() / 60.0
    return 0.0 if minutes < 0 else minutes


def format_relative_age(age_minutes: Optional[float]) -> Optional[str]:
    """Produce a concise relative age label for UI metadata."""
    if age_minutes is None:
        return None
    total = int(age_minutes)
    if total < 1:
        return "Just now"
    if total < 60:
        return f"{total}m ago"
    hours, minutes = divmod(total, 60)
    if hours < 24:
        return f"{hours}h {minutes}m ago" if minutes else f"{hours}h ago"
    days, remaining = divmod(hours, 24)
    return f"{days}d {remaining}h ago" if remaining else f"{days}d ago"


def article_rows(
    articles: Sequence[Article], now_utc: Optional[datetime] = None
) -> List[DisplayRow]:
    """Build 1-based display rows for the list view."""
    now = now_utc or datetime.now(timezone.utc)
    return [
        DisplayRow(
            position=position,
            source=article.source,
            relative_time=format_relative_age(article_age_minutes(article, now)) or "",
            title=article.title,
        )
        for position, article in enumerate(articles, start=1)
    ]


__all__ = ["article_age_minutes", "article_rows", "format_relative_age"]
