"""Sync cycle: cached load, feed fetch, merge, persist.

A cycle runs on a worker thread (see ``RefreshController``) and returns a
``SyncResult`` describing what should be published. Per-item and per-feed
failures are collected as diagnostics; only a store read failure aborts the
cycle.

Updates: v0.1 - 2026-10-18 - Introduced the sync orchestrator.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from ..errors import (
    AllFeedsFailed,
    FetchError,
    StoreWriteError,
    UnsupportedTimeFormat,
)
from ..models import Article, FeedDescriptor, FeedItem, SyncResult, SyncState
from ..store import ArticleStore
from .merging import merge_articles
from .ordering import sort_articles_desc
from .timeutils import parse_published

logger = logging.getLogger(__name__)


class FeedFetcher(Protocol):
    def fetch(self, url: str) -> List[FeedItem]:
        ...


class SyncOrchestrator:
    """Drive one cache-then-fetch-then-merge-then-persist cycle.

    The store is only used for the duration of ``run_cycle``; feeds are read
    through ``feeds_provider`` on every cycle so configuration edits are
    picked up without restarting.
    """

    def __init__(
        self,
        store: ArticleStore,
        source: FeedFetcher,
        feeds_provider: Callable[[], Sequence[FeedDescriptor]],
        *,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self.store = store
        self.source = source
        self.feeds_provider = feeds_provider
        self._clock = clock
        self.state = SyncState.IDLE

    def run_cycle(self) -> SyncResult:
        """Run a single sync cycle.

        ``state`` is ``LOADING`` while the cycle runs and back to ``IDLE`` once it
        returns or raises; the outcome is carried by ``SyncResult.state``.

        Raises:
            StoreReadError: when the cached articles cannot be loaded; the
                caller keeps its previous view.
        """
        self.state = SyncState.LOADING
        try:
            return self._run_cycle()
        finally:
            self.state = SyncState.IDLE

    def _run_cycle(self) -> SyncResult:
        fetched_at = self._clock()
        cached = self.store.load_all()

        feeds = list(self.feeds_provider())
        fresh, diagnostics, failed_feeds = self.fetch_fresh(feeds)

        if failed_feeds == len(feeds) and not fresh:
            fetch_errors = [exc for exc in diagnostics if isinstance(exc, FetchError)]
            diagnostics.append(AllFeedsFailed(fetch_errors))
            logger.warning(
                "No feed could be fetched; showing %d cached article(s).", len(cached)
            )
            return SyncResult(
                state=SyncState.CACHE_ONLY,
                articles=sort_articles_desc(cached),
                diagnostics=diagnostics,
                persisted=False,
                fetched_at=fetched_at,
                fresh_count=0,
                cached_count=len(cached),
            )

        persisted = True
        try:
            self.store.insert_if_absent(fresh)
        except StoreWriteError as exc:
            persisted = False
            diagnostics.append(exc)
            logger.error("Unable to persist fresh articles: %s", exc)

        articles = sort_articles_desc(merge_articles(fresh, cached))
        logger.info(
            "Sync complete: %d fresh, %d cached, %d shown, %d diagnostic(s).",
            len(fresh),
            len(cached),
            len(articles),
            len(diagnostics),
        )
        return SyncResult(
            state=SyncState.SUCCESS,
            articles=articles,
            diagnostics=diagnostics,
            persisted=persisted,
            fetched_at=fetched_at,
            fresh_count=len(fresh),
            cached_count=len(cached),
        )

    def fetch_fresh(
        self, feeds: Sequence[FeedDescriptor]
    ) -> Tuple[List[Article], List[Exception], int]:
        """Fetch every feed independently.

        Returns the parsed articles, the collected per-feed and per-item
        errors, and how many feeds failed to fetch.
        """
        articles: List[Article] = []
        diagnostics: List[Exception] = []
        failed_feeds = 0

        for feed in feeds:
            try:
                items = self.source.fetch(feed.url)
            except FetchError as exc:
                failed_feeds += 1
                error = FetchError(feed.url, exc.reason, source=feed.source)
                diagnostics.append(error)
                logger.warning("%s", error)
                continue

            for item in items:
                article = self._article_from_item(feed, item, diagnostics)
                if article is not None:
                    articles.append(article)

        return articles, diagnostics, failed_feeds

    def _article_from_item(
        self, feed: FeedDescriptor, item: FeedItem, diagnostics: List[Exception]
    ) -> Optional[Article]:
        if not item.published_raw:
            return None
        try:
            published_at = parse_published(item.published_raw)
        except UnsupportedTimeFormat:
            error = UnsupportedTimeFormat(
                item.published_raw, title=item.title, source=feed.source
            )
            diagnostics.append(error)
            logger.debug("%s", error)
            return None
        return Article(
            source=feed.source,
            title=item.title,
            published_at=published_at,
            link=item.link,
        )


__all__ = ["FeedFetcher", "SyncOrchestrator"]
