"""Tests for the quote batch store: cache policy, page fallback, navigation."""

from __future__ import annotations

import json
import threading
from typing import List

import pytest

from quotify.engine.errors import EmptyStoreError, LoadInProgressError, NetworkError, StorageError
from quotify.engine.fallback_quotes import FALLBACK_QUOTES
from quotify.engine.quote import Quote
from quotify.engine.quote_cache import MemoryCache
from quotify.engine.quote_store import (
    BATCH_KEY,
    FETCHED_AT_KEY,
    TTL_MS,
    Position,
    QuoteBatchStore,
)

NOW = 1_700_000_000_000


class FakeSource:
    """Returns numbered live quotes; pages listed in fail_pages raise NetworkError."""

    def __init__(self, fail_pages=(), short_pages=None):
        self.fail_pages = set(fail_pages)
        self.short_pages = short_pages or {}
        self.calls: List[int] = []

    def fetch_page(self, limit: int) -> List[Quote]:
        page = len(self.calls)
        self.calls.append(limit)
        if page in self.fail_pages:
            raise NetworkError(f"page {page} down")
        count = self.short_pages.get(page, limit)
        return [Quote(text=f"live {page}-{i}", author="API") for i in range(count)]


class BrokenCache:
    def get(self, key):
        raise StorageError("storage disabled")

    def set(self, key, value):
        raise StorageError("quota exceeded")


class Clock:
    def __init__(self, now: int = NOW):
        self.now = now

    def __call__(self) -> int:
        return self.now


def _store(source=None, cache=None, clock=None) -> QuoteBatchStore:
    return QuoteBatchStore(
        source=source or FakeSource(),
        cache=cache if cache is not None else MemoryCache(),
        clock=clock or Clock(),
    )


def _seed_cache(cache: MemoryCache, batch: List[Quote], fetched_at: int) -> None:
    cache.set(BATCH_KEY, json.dumps([q.to_dict() for q in batch]).encode("utf-8"))
    cache.set(FETCHED_AT_KEY, str(fetched_at).encode("ascii"))


class TestLoadFresh:
    def test_all_pages_succeed(self):
        source = FakeSource()
        store = _store(source=source)
        batch = store.load()
        assert len(batch) == 60
        assert source.calls == [20, 20, 20]
        assert batch[0] == Quote(text="live 0-0", author="API")
        assert batch[59] == Quote(text="live 2-19", author="API")

    def test_all_pages_fail_gives_fallback_batch(self):
        source = FakeSource(fail_pages={0, 1, 2})
        store = _store(source=source)
        batch = store.load()
        assert batch == list(FALLBACK_QUOTES[:60])

    def test_one_page_fails_is_backfilled_in_page_order(self):
        store = _store(source=FakeSource(fail_pages={1}))
        batch = store.load()
        assert len(batch) == 60
        assert all(q.author == "API" for q in batch[:20])
        assert batch[20:40] == list(FALLBACK_QUOTES[20:40])
        assert all(q.author == "API" for q in batch[40:])
        assert batch[40].text == "live 2-0"

    def test_short_page_is_topped_up_from_its_fallback_slice(self):
        store = _store(source=FakeSource(short_pages={0: 5}))
        batch = store.load()
        assert len(batch) == 60
        assert [q.text for q in batch[:5]] == [f"live 0-{i}" for i in range(5)]
        assert batch[5:20] == list(FALLBACK_QUOTES[5:20])

    def test_oversized_page_is_truncated(self):
        class Chatty(FakeSource):
            def fetch_page(self, limit):
                return super().fetch_page(limit) + [Quote(text="extra", author="API")]

        batch = _store(source=Chatty()).load()
        assert len(batch) == 60
        assert all(q.text != "extra" for q in batch)

    def test_unexpected_source_error_falls_back(self):
        class Exploding:
            def fetch_page(self, limit):
                raise RuntimeError("boom")

        batch = _store(source=Exploding()).load()
        assert batch == list(FALLBACK_QUOTES[:60])

    def test_batch_is_persisted_with_timestamp(self):
        cache = MemoryCache()
        clock = Clock()
        _store(cache=cache, clock=clock).load()
        assert cache.get(FETCHED_AT_KEY) == str(NOW).encode("ascii")
        stored = json.loads(cache.get(BATCH_KEY).decode("utf-8"))
        assert len(stored) == 60
        assert stored[0] == {"text": "live 0-0", "author": "API"}

    def test_uneven_page_size_last_page_is_smaller(self):
        source = FakeSource()
        store = QuoteBatchStore(source=source, cache=MemoryCache(), batch_size=50, page_size=20, clock=Clock())
        assert len(store.load()) == 50
        assert source.calls == [20, 20, 10]

    def test_fallback_table_must_cover_batch(self):
        with pytest.raises(ValueError):
            QuoteBatchStore(source=FakeSource(), cache=MemoryCache(), fallback=FALLBACK_QUOTES[:10])


class TestCachePolicy:
    def test_fresh_cache_skips_network(self):
        cache = MemoryCache()
        cached = [Quote(text=f"cached {i}", author="C") for i in range(60)]
        _seed_cache(cache, cached, NOW - 1000)
        source = FakeSource()
        batch = _store(source=source, cache=cache).load()
        assert batch == cached
        assert source.calls == []

    def test_stale_cache_refetches_and_overwrites(self):
        cache = MemoryCache()
        _seed_cache(cache, [Quote(text="old", author="C")] * 60, NOW - TTL_MS)
        source = FakeSource()
        batch = _store(source=source, cache=cache).load()
        assert source.calls == [20, 20, 20]
        assert batch[0].text == "live 0-0"
        assert cache.get(FETCHED_AT_KEY) == str(NOW).encode("ascii")

    def test_just_under_ttl_is_fresh(self):
        cache = MemoryCache()
        _seed_cache(cache, [Quote(text="old", author="C")] * 60, NOW - TTL_MS + 1)
        source = FakeSource()
        _store(source=source, cache=cache).load()
        assert source.calls == []

    def test_timestamp_in_future_is_stale(self):
        cache = MemoryCache()
        _seed_cache(cache, [Quote(text="old", author="C")] * 60, NOW + 5000)
        source = FakeSource()
        _store(source=source, cache=cache).load()
        assert len(source.calls) == 3

    def test_incomplete_cached_batch_is_ignored(self):
        cache = MemoryCache()
        _seed_cache(cache, [Quote(text="old", author="C")] * 10, NOW)
        source = FakeSource()
        _store(source=source, cache=cache).load()
        assert len(source.calls) == 3

    def test_corrupt_cache_is_a_miss(self):
        cache = MemoryCache({BATCH_KEY: b"{not json", FETCHED_AT_KEY: str(NOW).encode("ascii")})
        source = FakeSource()
        batch = _store(source=source, cache=cache).load()
        assert len(batch) == 60
        assert len(source.calls) == 3

    def test_force_bypasses_fresh_cache(self):
        cache = MemoryCache()
        _seed_cache(cache, [Quote(text="old", author="C")] * 60, NOW)
        source = FakeSource()
        batch = _store(source=source, cache=cache).load(force=True)
        assert batch[0].text == "live 0-0"
        assert len(source.calls) == 3

    def test_broken_storage_still_loads(self):
        source = FakeSource()
        store = _store(source=source, cache=BrokenCache())
        assert len(store.load()) == 60
        assert store.current().text == "live 0-0"

    def test_total_outage_then_reload_within_ttl_reuses_fallback_batch(self):
        cache = MemoryCache()
        clock = Clock()
        source = FakeSource(fail_pages={0, 1, 2})
        store = _store(source=source, cache=cache, clock=clock)
        first = store.load()

        clock.now += 60 * 60 * 1000
        second = _store(source=source, cache=cache, clock=clock).load()
        assert second == first == list(FALLBACK_QUOTES[:60])
        assert len(source.calls) == 3


class TestNavigation:
    def test_empty_store(self):
        store = _store()
        assert not store.is_ready
        assert store.position() == Position(index=0, total=0)
        with pytest.raises(EmptyStoreError):
            store.current()
        with pytest.raises(EmptyStoreError):
            store.advance()
        with pytest.raises(EmptyStoreError):
            store.retreat()

    def test_advance_and_retreat(self):
        store = _store()
        store.load()
        assert store.advance().text == "live 0-1"
        assert store.advance().text == "live 0-2"
        assert store.retreat().text == "live 0-1"
        assert store.position().index == 1

    def test_retreat_at_start_is_noop(self):
        store = _store()
        store.load()
        first = store.current()
        assert store.retreat() == first
        assert store.position().index == 0
        assert not store.position().has_previous

    def test_advance_at_end_is_noop(self):
        store = _store()
        store.load()
        for _ in range(59):
            store.advance()
        last = store.current()
        assert store.position().index == 59
        assert store.advance() == last
        assert store.position().index == 59
        assert not store.position().has_next

    def test_load_resets_cursor(self):
        store = _store()
        store.load()
        store.advance()
        store.advance()
        store.load()
        assert store.position().index == 0


class TestReentrancy:
    def test_second_load_while_in_flight_is_rejected(self):
        started = threading.Event()
        release = threading.Event()

        class SlowSource(FakeSource):
            def fetch_page(self, limit):
                started.set()
                release.wait(timeout=5)
                return super().fetch_page(limit)

        store = _store(source=SlowSource())
        worker = threading.Thread(target=store.load)
        worker.start()
        try:
            assert started.wait(timeout=5)
            assert store.is_loading
            with pytest.raises(LoadInProgressError):
                store.load()
        finally:
            release.set()
            worker.join(timeout=5)
        assert not store.is_loading
        assert len(store.batch()) == 60
