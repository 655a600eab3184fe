"""Quote batch store: cached batch of quotes plus a navigation cursor.

Lifecycle:
1. ``load()`` returns the cached batch if it is younger than the TTL
2. otherwise pages are fetched one after another from the QuoteSource
3. a failed (or short) page is filled from the matching fallback slice
4. the merged batch is persisted with the current timestamp
5. ``advance()`` / ``retreat()`` move the cursor, clamped to the batch
"""

from __future__ import annotations

import json
import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from quotify.engine.errors import EmptyStoreError, LoadInProgressError
from quotify.engine.fallback_quotes import FALLBACK_QUOTES
from quotify.engine.quote import Quote
from quotify.engine.quote_cache import PersistentCache
from quotify.engine.quote_source import QuoteSource

logger = logging.getLogger(__name__)

BATCH_SIZE = 60
PAGE_SIZE = 20
TTL_MS = 24 * 60 * 60 * 1000

BATCH_KEY = "quotify.batch"
FETCHED_AT_KEY = "quotify.fetched_at"


def _epoch_millis() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Position:
    index: int
    total: int

    @property
    def has_previous(self) -> bool:
        return self.index > 0

    @property
    def has_next(self) -> bool:
        return self.index < self.total - 1


class QuoteBatchStore:
    """Owns the current batch and cursor; source and cache are injected."""

    def __init__(
        self,
        source: QuoteSource,
        cache: PersistentCache,
        batch_size: int = BATCH_SIZE,
        page_size: int = PAGE_SIZE,
        ttl_ms: int = TTL_MS,
        fallback: Sequence[Quote] = FALLBACK_QUOTES,
        clock: Optional[Callable[[], int]] = None,
    ):
        if batch_size < 1 or page_size < 1:
            raise ValueError("batch_size and page_size must be positive")
        if len(fallback) < batch_size:
            raise ValueError(
                f"Fallback table has {len(fallback)} quotes, need at least {batch_size}"
            )
        self.source = source
        self.cache = cache
        self.batch_size = batch_size
        self.page_size = page_size
        self.ttl_ms = ttl_ms
        self.fallback = tuple(fallback)
        self.clock = clock or _epoch_millis

        self._batch: List[Quote] = []
        self._cursor = 0
        self._load_lock = threading.Lock()
        self._state_lock = threading.Lock()

    # ------------------------------------------------------------------ #
    # State
    # ------------------------------------------------------------------ #

    @property
    def is_ready(self) -> bool:
        return bool(self._batch)

    @property
    def is_loading(self) -> bool:
        return self._load_lock.locked()

    # ------------------------------------------------------------------ #
    # Loading
    # ------------------------------------------------------------------ #

    def load(self, force: bool = False) -> List[Quote]:
        """Make a full batch current and reset the cursor to 0.

        Uses the cached batch when it is fresh (unless *force*), otherwise
        fetches a new one and overwrites the cache. Network and storage
        failures never escape; the worst case is an all-fallback batch.

        Raises LoadInProgressError if another load is still running.
        """
        if not self._load_lock.acquire(blocking=False):
            raise LoadInProgressError("A quote batch is already being loaded")
        try:
            batch = None if force else self._read_cache(self.clock())
            if batch is None:
                batch = self._fetch_batch()
                self._write_cache(batch, self.clock())
            with self._state_lock:
                self._batch = batch
                self._cursor = 0
            return list(batch)
        finally:
            self._load_lock.release()

    def _fetch_batch(self) -> List[Quote]:
        """Fetch pages in order; page N falls back to fallback[N*page:(N+1)*page]."""
        batch: List[Quote] = []
        pages = math.ceil(self.batch_size / self.page_size)
        for page in range(pages):
            start = page * self.page_size
            limit = min(self.page_size, self.batch_size - start)
            fallback_slice = self.fallback[start:start + limit]
            try:
                fetched = list(self.source.fetch_page(limit))[:limit]
            except Exception as e:
                logger.warning("Quote page %d/%d failed, using fallback quotes: %s", page + 1, pages, e)
                fetched = []
            if len(fetched) < limit:
                if fetched:
                    logger.warning(
                        "Quote page %d/%d returned %d of %d quotes, topping up from fallback",
                        page + 1, pages, len(fetched), limit,
                    )
                fetched.extend(fallback_slice[len(fetched):])
            batch.extend(fetched)
        return batch

    def _read_cache(self, now: int) -> Optional[List[Quote]]:
        """Return the cached batch if present, decodable, complete and fresh."""
        try:
            raw_fetched_at = self.cache.get(FETCHED_AT_KEY)
            raw_batch = self.cache.get(BATCH_KEY)
        except Exception as e:
            logger.warning("Failed to read cached quotes, fetching fresh: %s", e)
            return None
        if raw_fetched_at is None or raw_batch is None:
            return None

        try:
            fetched_at = int(raw_fetched_at.decode("ascii"))
            batch = [Quote.from_dict(item) for item in json.loads(raw_batch.decode("utf-8"))]
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.warning("Cached quotes are corrupt, fetching fresh: %s", e)
            return None

        age = now - fetched_at
        if age < 0 or age >= self.ttl_ms:
            logger.info("Cached quotes are stale (age %d ms)", age)
            return None
        if len(batch) != self.batch_size:
            logger.info("Cached batch has %d quotes, expected %d", len(batch), self.batch_size)
            return None

        logger.info("Using cached quotes (age %d ms)", age)
        return batch

    def _write_cache(self, batch: List[Quote], now: int) -> None:
        payload = json.dumps([q.to_dict() for q in batch], ensure_ascii=False)
        try:
            self.cache.set(BATCH_KEY, payload.encode("utf-8"))
            self.cache.set(FETCHED_AT_KEY, str(now).encode("ascii"))
        except Exception as e:
            logger.warning("Failed to persist quote batch: %s", e)

    # ------------------------------------------------------------------ #
    # Navigation
    # ------------------------------------------------------------------ #

    def current(self) -> Quote:
        with self._state_lock:
            return self._current_locked()

    def advance(self) -> Quote:
        with self._state_lock:
            self._require_batch()
            self._cursor = min(self._cursor + 1, len(self._batch) - 1)
            return self._current_locked()

    def retreat(self) -> Quote:
        with self._state_lock:
            self._require_batch()
            self._cursor = max(self._cursor - 1, 0)
            return self._current_locked()

    def position(self) -> Position:
        """Cursor and batch length; Position(0, 0) before the first load."""
        with self._state_lock:
            return Position(index=self._cursor, total=len(self._batch))

    def batch(self) -> List[Quote]:
        with self._state_lock:
            return list(self._batch)

    def _current_locked(self) -> Quote:
        self._require_batch()
        return self._batch[self._cursor]

    def _require_batch(self) -> None:
        if not self._batch:
            raise EmptyStoreError("No quotes loaded yet, call load() first")
