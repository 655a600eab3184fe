"""Clipboard text and share-intent links for a quote."""

from __future__ import annotations

from typing import Sequence
from urllib.parse import quote as url_quote

from quotify.engine.quote import Quote

TWEET_INTENT_URL = "https://twitter.com/intent/tweet"
DEFAULT_HASHTAGS = ("Quotify", "Inspiration")
# characters encodeURIComponent leaves unescaped, beyond letters, digits and "_.-~"
URI_COMPONENT_SAFE = "!'()*"


def clipboard_text(quote: Quote) -> str:
    """Plain-text form used for copy and share: '<text> - <author>'."""
    return f"{quote.text} - {quote.author}"


def tweet_intent_url(quote: Quote, hashtags: Sequence[str] = DEFAULT_HASHTAGS) -> str:
    url = f"{TWEET_INTENT_URL}?text={url_quote(clipboard_text(quote), safe=URI_COMPONENT_SAFE)}"
    if hashtags:
        url += "&hashtags=" + ",".join(url_quote(tag, safe=URI_COMPONENT_SAFE) for tag in hashtags)
    return url
