from __future__ import annotations

import html
from typing import Tuple

from quotify.engine.errors import EmptyStoreError, LoadInProgressError
from quotify.engine.quote import Quote
from quotify.engine.quote_store import Position, QuoteBatchStore
from quotify.engine.sharing import clipboard_text, tweet_intent_url

WIDGET_CSS = """
.quote-card { max-width: 640px; margin: 0 auto; padding: 32px; border-radius: 12px;
              background: #ffffff; box-shadow: 0 4px 18px rgba(0, 0, 0, 0.08); }
.quote-text { font-size: 1.5rem; line-height: 1.5; font-style: italic; }
.quote-author { margin-top: 16px; text-align: right; color: #555555; }
.quote-counter { margin-top: 8px; font-size: 0.8rem; color: #999999; }
.fade-in { animation: quote-fade-in 0.8s ease-in; }
.quote-loading { text-align: center; color: #999999; padding: 48px; }
@keyframes quote-fade-in { from { opacity: 0; } to { opacity: 1; } }
"""

# (html, clipboard text, share markdown, previous enabled, next enabled)
WidgetState = Tuple[str, str, str, bool, bool]


def render_quote_html(quote: Quote, position: Position) -> str:
    # data-index changes on every step so the browser replays the fade-in
    return (
        f'<div class="quote-card fade-in" data-index="{position.index}">'
        f'<div class="quote-text">&ldquo;{html.escape(quote.text)}&rdquo;</div>'
        f'<div class="quote-author">- {html.escape(quote.author)}</div>'
        f'<div class="quote-counter">{position.index + 1} / {position.total}</div>'
        "</div>"
    )


def render_loading_html() -> str:
    return '<div class="quote-card quote-loading">Loading quotes...</div>'


def render_share_markdown(quote: Quote) -> str:
    return f"[Share on X]({tweet_intent_url(quote)})"


def widget_state(store: QuoteBatchStore) -> WidgetState:
    """Everything the widget shows for the store's current quote."""
    try:
        quote = store.current()
    except EmptyStoreError:
        return render_loading_html(), "", "", False, False
    position = store.position()
    return (
        render_quote_html(quote, position),
        clipboard_text(quote),
        render_share_markdown(quote),
        position.has_previous,
        position.has_next,
    )


def open_session(shared: QuoteBatchStore) -> QuoteBatchStore:
    """Store for one browser session; reuses the shared source, cache and limits."""
    return QuoteBatchStore(
        source=shared.source,
        cache=shared.cache,
        batch_size=shared.batch_size,
        page_size=shared.page_size,
        ttl_ms=shared.ttl_ms,
        fallback=shared.fallback,
        clock=shared.clock,
    )


def load_session(store: QuoteBatchStore, force: bool = False) -> Tuple[WidgetState, bool]:
    """Load the session's batch and render it.

    Returns (state, busy); busy is True when the session was already loading,
    in which case the state reflects whatever the session currently holds.
    """
    try:
        store.load(force=force)
    except LoadInProgressError:
        return widget_state(store), True
    return widget_state(store), False
