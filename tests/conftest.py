"""Pytest configuration to ensure imports resolve cleanly for tests.

- Prepend project root to sys.path so 'newsfeed_neon' is importable with testpaths.
- Provide small article/feed factories shared by the test modules.
"""

from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, List

import pytest


def _ensure_project_root_on_syspath() -> None:
    """Prepend repository root to sys.path for package imports."""
    tests_dir = Path(__file__).resolve().parent
    project_root = tests_dir.parent
    root_str = str(project_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_ensure_project_root_on_syspath()

from newsfeed_neon.models import Article  # noqa: E402

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_article() -> Callable[..., Article]:
    """Factory building articles published ``minutes_ago`` before BASE_TIME."""

    def _make(
        link: str,
        *,
        title: str = "",
        source: str = "Feed",
        minutes_ago: int = 0,
    ) -> Article:
        return Article(
            source=source,
            title=title or f"Title for {link}",
            published_at=BASE_TIME - timedelta(minutes=minutes_ago),
            link=link,
        )

    return _make


@pytest.fixture
def article_list(make_article: Callable[..., Article]) -> Callable[[int], List[Article]]:
    """Factory returning ``count`` articles, newest first."""

    def _make(count: int) -> List[Article]:
        return [
            make_article(f"https://example.com/{index}", minutes_ago=index)
            for index in range(count)
        ]

    return _make
