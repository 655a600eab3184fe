"""Quote sources: the abstract page fetcher and the quotable.io client."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx

from quotify.engine.errors import NetworkError
from quotify.engine.quote import Quote

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.quotable.io"
RANDOM_QUOTES_PATH = "/quotes/random"


class QuoteSource:
    """Fetches pages of quotes from somewhere remote."""

    def fetch_page(self, limit: int) -> List[Quote]:
        """Return up to *limit* quotes. Raises NetworkError on failure."""
        raise NotImplementedError


class QuotableSource(QuoteSource):
    """quotable.io client: ``GET /quotes/random?limit=N`` returns a JSON list."""

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        verify: bool = True,
        client: Optional[httpx.Client] = None,
    ):
        self.url = api_url.rstrip("/") + RANDOM_QUOTES_PATH
        self._client = client or httpx.Client(
            headers={"Accept": "application/json"},
            follow_redirects=True,
            timeout=timeout,
            verify=verify,
        )

    def fetch_page(self, limit: int) -> List[Quote]:
        logger.debug("Fetching %d quotes from %s", limit, self.url)
        try:
            response = self._client.get(self.url, params={"limit": limit})
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise NetworkError(f"Quote request failed: {e}") from e
        except ValueError as e:
            raise NetworkError(f"Quote API returned invalid JSON: {e}") from e

        if not isinstance(payload, list):
            raise NetworkError(f"Quote API returned {type(payload).__name__}, expected a list")

        return _parse_items(payload)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "QuotableSource":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _parse_items(payload: List[Any]) -> List[Quote]:
    """Map API records to Quotes, skipping records without text."""
    quotes: List[Quote] = []
    for item in payload:
        if not isinstance(item, dict) or not str(item.get("content") or "").strip():
            logger.debug("Skipping malformed quote record: %r", item)
            continue
        quotes.append(Quote.from_api(item))
    return quotes
