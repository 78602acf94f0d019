"""HTTP transport and pagination around the pure parsers.

The parsers never fetch anything. A ``Transport`` fetches one JSON body per
call, and ``paginate`` walks a List by following ``next_page`` links.
Respects the API's rate limit (configurable via ``ClientConfig``).
"""

from __future__ import annotations

import asyncio
import logging
from typing import (
    Any,
    AsyncIterator,
    Callable,
    Optional,
    Protocol,
    TypeVar,
    Union,
    runtime_checkable,
)

import httpx

from scryfall_types.api_error import Error, parse_error
from scryfall_types.config import ClientConfig
from scryfall_types.errors import ValidationError
from scryfall_types.listing import ListPage, parse_list
from scryfall_types.uri import Uri

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApiError(Exception):
    """Raised by a transport when the API answers with an error object."""

    def __init__(self, error: Error) -> None:
        self.error = error
        super().__init__(f"{error.status} {error.code}: {error.details}")


@runtime_checkable
class Transport(Protocol):
    """What the pagination helpers need from an HTTP client."""

    async def fetch(self, uri: Union[Uri, str]) -> Any:
        """Return the decoded JSON body found at ``uri``."""
        ...

    async def close(self) -> None:
        """Clean up any resources (HTTP clients, etc.)."""
        ...


class HttpxTransport:
    """``Transport`` backed by ``httpx.AsyncClient``.

    Relative URIs are resolved against ``config.base_url``; ``next_page``
    links are absolute and used as given.
    """

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self._config = config or ClientConfig()
        self._rate_limit = self._config.rate_limit_ms / 1000.0
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=self._config.timeout,
                headers={
                    "User-Agent": self._config.user_agent,
                    "Accept": "application/json",
                },
            )
        return self._client

    async def _throttle(self) -> None:
        if self._rate_limit > 0:
            await asyncio.sleep(self._rate_limit)

    async def fetch(self, uri: Union[Uri, str]) -> Any:
        client = self._get_client()
        target = str(uri)
        await self._throttle()
        retries = self._config.max_retries
        for attempt in range(retries):
            try:
                resp = await client.get(target)
            except httpx.TransportError as exc:
                if attempt < retries - 1:
                    logger.warning("Request to %s failed (%s), retrying", target, exc)
                    await asyncio.sleep(1.0)
                    continue
                raise
            if resp.status_code == 429:
                # Rate limited: exponential backoff
                delay = (2 ** attempt) * 1.0
                logger.warning("Rate limited, backing off %.1fs", delay)
                await asyncio.sleep(delay)
                continue
            if resp.is_error:
                _raise_api_error(resp)
            return resp.json()
        raise RuntimeError(f"Max retries exceeded for {target}")

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()


def _raise_api_error(resp: httpx.Response) -> None:
    """Map an error response onto ``ApiError``.

    Bodies that are not a valid error object fall back to httpx's own error.
    """
    try:
        error = parse_error(resp.json())
    except (ValueError, ValidationError):
        logger.debug("Error response from %s has no error object", resp.request.url)
        resp.raise_for_status()
        raise
    logger.info("API error %d (%s) for %s", error.status, error.code, resp.request.url)
    raise ApiError(error)


async def paginate(
    transport: Transport,
    uri: Union[Uri, str],
    element_parser: Callable[[Any], T],
    max_pages: Optional[int] = None,
) -> AsyncIterator[ListPage[T]]:
    """Yield each page of a List, starting at ``uri``.

    Stops after the last page or after ``max_pages`` pages. A page that
    claims more results without a ``next_page`` raises
    ``MissingContinuation`` once it has been yielded.
    """
    next_uri: Optional[Union[Uri, str]] = uri
    fetched = 0
    while next_uri is not None:
        if max_pages is not None and fetched >= max_pages:
            logger.info("Stopping pagination after %d pages", fetched)
            return
        raw = await transport.fetch(next_uri)
        page = parse_list(raw, element_parser)
        fetched += 1
        logger.debug("Fetched page %d from %s (%d items)", fetched, next_uri, len(page))
        yield page
        next_uri = page.continuation()
