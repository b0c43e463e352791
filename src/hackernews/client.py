"""Hacker News client.

Async client for the Algolia HN Search API (https://hn.algolia.com/api).
Each public coroutine issues exactly one GET request and either returns a
complete result or raises one of the errors in ``hackernews.errors``.
Cancelling the awaiting task aborts the in-flight request.
"""

import logging
import time
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from hackernews.errors import APIError, DecodeError, TransportError
from hackernews.models import Item, SearchResult
from hackernews.normalizer import hits_to_items
from hackernews.query import SearchRequest
from hackernews.thread import reconstruct_thread
from hackernews.utils.config import get_settings

logger = logging.getLogger(__name__)

SEARCH_PATH = "/search"
SEARCH_BY_DATE_PATH = "/search_by_date"
ITEM_PATH = "/items/{item_id}"


class HackerNewsClient:
    """Read-only client for Hacker News listings, items and searches.

    The HTTP client can be injected and is then reused for every call and
    left open. Without one, the client can be used as an async context
    manager to share a connection pool, or it opens a short-lived
    ``httpx.AsyncClient`` per call.

    Example:
        >>> async with HackerNewsClient() as hn:
        ...     stories = await hn.front_page()
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        hits_per_page: Optional[int] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root, defaults to HN_API_BASE_URL
            timeout: Request timeout in seconds, defaults to API_TIMEOUT
            hits_per_page: Page size of the listing shortcuts, defaults to
                HN_HITS_PER_PAGE (34)
            http_client: Existing client to reuse; never closed here
            transport: Transport for internally created clients
        """
        settings = get_settings()
        self._base_url = (base_url or settings.HN_API_BASE_URL).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.API_TIMEOUT
        self._hits_per_page = (
            hits_per_page if hits_per_page is not None else settings.HN_HITS_PER_PAGE
        )
        self._transport = transport
        self._http_client = http_client
        self._owns_http_client = False

        if self._hits_per_page <= 0:
            raise ValueError("hits_per_page must be positive")

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def hits_per_page(self) -> int:
        return self._hits_per_page

    async def __aenter__(self) -> "HackerNewsClient":
        if self._http_client is None:
            self._http_client = self._new_http_client()
            self._owns_http_client = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the pooled HTTP client if this instance created it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_http_client = False

    # Listings

    async def front_page(self) -> List[Item]:
        """Stories currently on https://news.ycombinator.com."""
        result = await self.search(
            SearchRequest(tags="front_page", results_per_page=self._hits_per_page)
        )
        return result.items

    async def newest(self) -> List[Item]:
        """Stories on https://news.ycombinator.com/newest."""
        result = await self.search_recent(
            SearchRequest(tags="story", results_per_page=self._hits_per_page)
        )
        return result.items

    async def ask_hn(self) -> List[Item]:
        """Stories on https://news.ycombinator.com/ask."""
        result = await self.search_recent(
            SearchRequest(tags="ask_hn", results_per_page=self._hits_per_page)
        )
        return result.items

    async def show_hn(self) -> List[Item]:
        """Stories on https://news.ycombinator.com/show."""
        result = await self.search_recent(
            SearchRequest(tags="show_hn", results_per_page=self._hits_per_page)
        )
        return result.items

    # Lookup

    async def find(self, item_id: int) -> Item:
        """Fetch a single item with its cleaned, chronologically sorted thread.

        Args:
            item_id: Item identifier

        Returns:
            The item; removed comments (no author or no text) are dropped
            together with their replies

        Raises:
            TransportError: If the request could not be sent
            APIError: If the API answers with a non-2xx status
            DecodeError: If the body is not a valid item
        """
        payload, body = await self._get_json(ITEM_PATH.format(item_id=item_id))
        try:
            item = Item.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(f"invalid item payload: {exc}", body=body) from exc
        return reconstruct_thread(item)

    # Searches

    async def search(self, request: SearchRequest) -> SearchResult:
        """Search sorted by relevance, then points, then number of comments.

        ``request.page`` and the returned ``SearchResult.page`` are 1-based;
        the API itself pages from 0.

        Raises:
            TransportError, APIError, DecodeError, ConversionError
        """
        if request.page >= 1:
            request = request.model_copy(update={"page": request.page - 1})
        result = await self._search(SEARCH_PATH, request)
        return result.model_copy(update={"page": result.page + 1})

    async def search_recent(self, request: SearchRequest) -> SearchResult:
        """Search sorted by date, most recent first.

        The page number is sent and returned as is.

        Raises:
            TransportError, APIError, DecodeError, ConversionError
        """
        return await self._search(SEARCH_BY_DATE_PATH, request)

    async def _search(self, path: str, request: SearchRequest) -> SearchResult:
        querystring = request.querystring()
        if querystring:
            path = f"{path}?{querystring}"
        payload, body = await self._get_json(path)
        try:
            result = SearchResult.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(f"invalid search payload: {exc}", body=body) from exc
        items = hits_to_items(result.hits)
        logger.debug(
            f"Search returned {len(items)} hits (page {result.page}/{result.num_pages})",
            extra={"hits": len(items)},
        )
        return result.model_copy(update={"items": items})

    # Transport

    def _new_http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    async def _get(self, url: str) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.get(url)
        async with self._new_http_client() as client:
            return await client.get(url)

    async def _get_json(self, path: str) -> tuple[Any, str]:
        """GET ``path`` and decode the JSON body.

        Returns:
            Decoded payload and the raw body text

        Raises:
            TransportError: If the URL is invalid or httpx fails to complete
                the request
            APIError: If the status is not 2xx
            DecodeError: If the body is not JSON
        """
        url = f"{self._base_url}{path}"
        started = time.perf_counter()
        try:
            response = await self._get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"GET {url} failed: {exc}", url=url) from exc

        body = response.text
        logger.debug(
            f"GET {url} -> {response.status_code}",
            extra={
                "method": "GET",
                "url": url,
                "status_code": response.status_code,
                "elapsed_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
        if not response.is_success:
            raise APIError(response.status_code, body, url=url)

        try:
            return response.json(), body
        except ValueError as exc:
            raise DecodeError(f"invalid JSON from {url}: {exc}", body=body) from exc
