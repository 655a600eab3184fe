"""Quotes router: load the batch, step through it, share the current quote."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from quotify.api.deps import get_store, quote_view
from quotify.api.models import PositionOut, QuoteView, ShareOut
from quotify.engine.errors import EmptyStoreError, LoadInProgressError
from quotify.engine.sharing import clipboard_text, tweet_intent_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/quotes", tags=["quotes"])

# seconds a client should wait before retrying while a batch is loading
LOAD_RETRY_AFTER = 1


def _load(force: bool) -> None:
    try:
        get_store().load(force=force)
    except LoadInProgressError as e:
        raise HTTPException(
            status_code=409,
            detail=str(e),
            headers={"Retry-After": str(LOAD_RETRY_AFTER)},
        )


@router.post("/load", response_model=QuoteView)
def load_quotes(force: bool = Query(False, description="Skip the cache and fetch a new batch")):
    """Load the batch (cached if fresh) and return its first quote."""
    _load(force)
    return quote_view(get_store())


@router.get("/current", response_model=QuoteView)
def get_current_quote():
    """Return the current quote, loading the batch first on a cold start."""
    store = get_store()
    if not store.is_ready:
        logger.info("No batch loaded yet, loading on first request")
        _load(force=False)
    return quote_view(store)


@router.post("/next", response_model=QuoteView)
def next_quote():
    store = get_store()
    try:
        store.advance()
    except EmptyStoreError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return quote_view(store)


@router.post("/previous", response_model=QuoteView)
def previous_quote():
    store = get_store()
    try:
        store.retreat()
    except EmptyStoreError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return quote_view(store)


@router.get("/position", response_model=PositionOut)
def get_position():
    pos = get_store().position()
    return {
        "index": pos.index,
        "total": pos.total,
        "has_previous": pos.has_previous,
        "has_next": pos.has_next,
    }


@router.get("/share", response_model=ShareOut)
def share_quote():
    """Clipboard text and tweet-intent URL for the current quote."""
    try:
        quote = get_store().current()
    except EmptyStoreError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return {"clipboard_text": clipboard_text(quote), "tweet_url": tweet_intent_url(quote)}
