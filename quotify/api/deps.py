"""Shared dependencies for the quotify API."""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional

from quotify.api.config import Settings, load_settings
from quotify.engine.quote_cache import JsonFileCache
from quotify.engine.quote_source import QuotableSource
from quotify.engine.quote_store import QuoteBatchStore

_store: Optional[QuoteBatchStore] = None
_store_guard = threading.Lock()


def build_store(settings: Settings) -> QuoteBatchStore:
    """Wire a store to the quotable.io client and the on-disk cache."""
    source = QuotableSource(
        api_url=settings.api_url,
        timeout=settings.request_timeout,
        verify=settings.verify_tls,
    )
    return QuoteBatchStore(
        source=source,
        cache=JsonFileCache(settings.cache_path),
        batch_size=settings.batch_size,
        page_size=settings.page_size,
        ttl_ms=settings.ttl_ms,
    )


def get_store() -> QuoteBatchStore:
    """Return the process-wide store, building it on first use."""
    global _store
    with _store_guard:
        if _store is None:
            _store = build_store(load_settings())
        return _store


def quote_view(store: QuoteBatchStore) -> Dict[str, Any]:
    """Current quote plus cursor state, as returned by every navigation endpoint."""
    quote = store.current()
    pos = store.position()
    return {
        "quote": quote.to_dict(),
        "index": pos.index,
        "total": pos.total,
        "has_previous": pos.has_previous,
        "has_next": pos.has_next,
    }
