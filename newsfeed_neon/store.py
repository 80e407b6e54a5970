"""Durable article stores.

Two backends share the ``ArticleStore`` interface:

- ``SQLiteArticleStore`` keeps one row per article in a local SQLite file and
  opens a fresh connection per call, so no handle outlives a sync cycle.
- ``RedisArticleStore`` keeps JSON records in a hash plus a sorted set scored
  by publish time, and is selected when ``REDIS_URL`` is configured.

Both persist ``(source, title, published_at as epoch milliseconds, link)`` with
``link`` unique, and apply inserts as a single atomic batch where existing
links are left untouched.
"""

from __future__ import annotations

import json
import logging
import sqlite3
import threading
from contextlib import closing
from pathlib import Path
from typing import Any, Callable, List, Optional, Protocol, Sequence

import redis

from .config import DB_PATH, REDIS_KEY_PREFIX, REDIS_URL
from .errors import StoreReadError, StoreWriteError
from .models import Article, datetime_from_millis

logger = logging.getLogger(__name__)


class ArticleStore(Protocol):
    def load_all(self) -> List[Article]:
        """Return every stored article, newest first."""

    def insert_if_absent(self, articles: Sequence[Article]) -> None:
        """Insert articles whose link is not stored yet, atomically."""


# --- SQLite ------------------------------------------------------------------------------------

_SCHEMA = """
CREATE TABLE IF NOT EXISTS articles (
    id       INTEGER NOT NULL PRIMARY KEY,
    source   TEXT,
    title    TEXT,
    datetime INTEGER,
    link     TEXT UNIQUE
);
"""


class SQLiteArticleStore:
    def __init__(self, path: Path = DB_PATH) -> None:
        self.path = Path(path)

    def _connect(self) -> sqlite3.Connection:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        connection = sqlite3.connect(str(self.path))
        try:
            connection.execute(_SCHEMA)
        except sqlite3.Error:
            connection.close()
            raise
        return connection

    def load_all(self) -> List[Article]:
        try:
            with closing(self._connect()) as connection:
                rows = connection.execute(
                    "SELECT source, title, datetime, link FROM articles ORDER BY datetime DESC"
                ).fetchall()
        except (sqlite3.Error, OSError) as exc:
            raise StoreReadError(f"querying articles from {self.path}: {exc}") from exc

        articles: List[Article] = []
        for source, title, millis, link in rows:
            if not link or millis is None:
                continue
            try:
                published_at = datetime_from_millis(int(millis))
            except (TypeError, ValueError, OverflowError):
                logger.debug("Skipping stored row for %s with bad timestamp %r", link, millis)
                continue
            articles.append(
                Article(
                    source=source or "",
                    title=title or "",
                    published_at=published_at,
                    link=link,
                )
            )
        return articles

    def insert_if_absent(self, articles: Sequence[Article]) -> None:
        if not articles:
            return
        rows = [
            (article.source, article.title, article.published_millis, article.link)
            for article in articles
        ]
        try:
            with closing(self._connect()) as connection:
                with connection:
                    connection.executemany(
                        "INSERT OR IGNORE INTO articles (source, title, datetime, link) "
                        "VALUES (?, ?, ?, ?)",
                        rows,
                    )
        except (sqlite3.Error, OSError) as exc:
            raise StoreWriteError(f"inserting {len(rows)} article(s) into {self.path}: {exc}") from exc


# --- Redis -------------------------------------------------------------------------------------

_redis_client: Optional[Any] = None
_redis_lock = threading.Lock()


def get_redis_client() -> Optional[Any]:
    """Return a cached Redis client if ``REDIS_URL`` is configured."""

    global _redis_client
    if not REDIS_URL:
        return None
    if _redis_client is not None:
        return _redis_client
    with _redis_lock:
        if _redis_client is not None:
            return _redis_client
        try:
            _redis_client = redis.from_url(REDIS_URL, decode_responses=True)
        except Exception as exc:  # pragma: no cover - redis connection failure
            logger.warning("Unable to connect to Redis store: %s", exc)
            _redis_client = None
    return _redis_client


class RedisArticleStore:
    def __init__(
        self,
        client_factory: Callable[[], Optional[Any]] = get_redis_client,
        *,
        prefix: str = REDIS_KEY_PREFIX,
    ) -> None:
        self._client_factory = client_factory
        base = prefix.strip() or "newsfeed:articles"
        self.records_key = f"{base}:records"
        self.index_key = f"{base}:by_time"

    def _client(self, error_cls: type) -> Any:
        client = self._client_factory()
        if client is None:
            raise error_cls("Redis store is not configured or unreachable")
        return client

    def _check_key_types(self, pipe: Any) -> None:
        expected = {self.records_key: "hash", self.index_key: "zset"}
        for key, kind in expected.items():
            actual = pipe.type(key)
            if isinstance(actual, bytes):
                actual = actual.decode()
            if actual not in (kind, "none"):
                raise StoreWriteError(f"Redis key {key} holds a {actual}, expected a {kind}")

    def load_all(self) -> List[Article]:
        client = self._client(StoreReadError)
        try:
            links = client.zrevrange(self.index_key, 0, -1)
            payloads = client.hmget(self.records_key, links) if links else []
        except redis.RedisError as exc:
            raise StoreReadError(f"reading articles from Redis: {exc}") from exc

        articles: List[Article] = []
        for link, payload in zip(links, payloads):
            if not payload:
                logger.debug("Redis index references missing record for %s", link)
                continue
            try:
                record = json.loads(payload)
            except json.JSONDecodeError:
                logger.debug("Stored record for %s is not valid JSON", link)
                continue
            article = Article.from_record(record) if isinstance(record, dict) else None
            if article is not None:
                articles.append(article)
        return articles

    def insert_if_absent(self, articles: Sequence[Article]) -> None:
        if not articles:
            return
        client = self._client(StoreWriteError)
        try:
            with client.pipeline(transaction=True) as pipe:
                # MULTI/EXEC does not roll back commands that fail at runtime, so
                # key types are checked under WATCH before anything is queued.
                pipe.watch(self.records_key, self.index_key)
                self._check_key_types(pipe)
                pipe.multi()
                for article in articles:
                    payload = json.dumps(article.as_record(), ensure_ascii=False)
                    pipe.hsetnx(self.records_key, article.link, payload)
                    pipe.zadd(self.index_key, {article.link: article.published_millis}, nx=True)
                pipe.execute()
        except redis.RedisError as exc:
            raise StoreWriteError(f"writing {len(articles)} article(s) to Redis: {exc}") from exc


def create_article_store(db_path: Path = DB_PATH) -> ArticleStore:
    """Select the Redis store when ``REDIS_URL`` is set, SQLite otherwise."""

    if REDIS_URL:
        logger.info("Using Redis article store.")
        return RedisArticleStore()
    logger.info("Using SQLite article store at %s", db_path)
    return SQLiteArticleStore(db_path)


__all__ = [
    "ArticleStore",
    "RedisArticleStore",
    "SQLiteArticleStore",
    "create_article_store",
    "get_redis_client",
]
