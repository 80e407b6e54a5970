"""Unit tests for relative age labels and display rows in newsfeed_neon.app.rendering."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from newsfeed_neon.app.rendering import article_rows, format_relative_age

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [
        (None, None),
        (0.4, "Just now"),
        (5, "5m ago"),
        (60, "1h ago"),
        (135, "2h 15m ago"),
        (24 * 60, "1d ago"),
        (27 * 60 + 10, "1d 3h ago"),
    ],
)
def test_format_relative_age(minutes, expected) -> None:
    """Ages are expressed in the largest sensible units."""
    assert format_relative_age(minutes) == expected


def test_article_rows_positions_and_labels(make_article) -> None:
    """Rows are numbered from one and carry source, age and title."""
    articles = [
        make_article("https://1", title="One", source="HN", minutes_ago=5),
        make_article("https://2", title="Two", source="Lobsters", minutes_ago=120),
    ]

    rows = article_rows(articles, BASE_TIME)

    assert [row.position for row in rows] == [1, 2]
    assert rows[0].source == "HN"
    assert rows[0].relative_time == "5m ago"
    assert rows[1].relative_time == "2h ago"
    assert rows[1].title == "Two"


def test_future_articles_read_as_just_now(make_article) -> None:
    """Clock skew never produces negative ages."""
    article = make_article("https://future", minutes_ago=-30)
    rows = article_rows([article], BASE_TIME - timedelta(minutes=1))
    assert rows[0].relative_time == "Just now"
