"""
HTTP client utilities for podreport.

Thin asynchronous wrapper around :class:`httpx.AsyncClient` with a bounded
timeout, a concurrency cap, and errors normalized to
:class:`~podreport.exceptions.NetworkError`. Failed requests are never
retried: a failed lookup simply means "no link" for that pod.
"""

from __future__ import annotations

import httpx
import asyncio
from typing import Any, Optional

from podreport.utils.logger import get_logger
from podreport.__version__ import __version__
from podreport.exceptions import NetworkError
from podreport.constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_MAX_CONCURRENCY,
    USER_AGENT_TEMPLATE,
)

logger = get_logger("http")


class HTTPClient:
    """Asynchronous HTTP client with a timeout and concurrency control.

    Args:
        timeout: Request timeout in seconds.
        verify_ssl: Whether to verify SSL certificates.
        user_agent: Custom User-Agent header value.
        max_concurrency: Maximum number of requests in flight at once.

    Example:
        >>> async with HTTPClient(timeout=10) as client:
        ...     data = await client.get_json(url, params={"query": "Alamofire"})
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        user_agent: Optional[str] = None,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ) -> None:
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.user_agent = user_agent or USER_AGENT_TEMPLATE.format(version=__version__)
        self.max_concurrency = max_concurrency

        self._client: Optional[httpx.AsyncClient] = None
        self._semaphore = asyncio.Semaphore(max_concurrency)

    async def __aenter__(self) -> "HTTPClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        await self.close()

    async def _ensure_client(self) -> None:
        """Initialize the underlying httpx client if needed."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                http2=True,
                verify=self.verify_ssl,
                follow_redirects=True,
                headers={
                    "User-Agent": self.user_agent,
                    "Accept": "application/json",
                },
            )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Perform a single GET request.

        Raises:
            NetworkError: On timeout, transport failure, or a 4xx/5xx status.
        """
        await self._ensure_client()
        assert self._client is not None

        clean_url = url.strip().strip("\"'")

        try:
            async with self._semaphore:
                response = await self._client.request("GET", clean_url, **kwargs)
        except httpx.TimeoutException as exc:
            raise NetworkError(
                f"Request timed out after {self.timeout}s",
                url=clean_url,
            ) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"Request failed: {exc}", url=clean_url) from exc

        if response.status_code >= 400:
            raise NetworkError(
                f"HTTP {response.status_code} error for {clean_url}",
                url=clean_url,
                status_code=response.status_code,
                response_body=response.text,
            )

        logger.debug("GET %s -> %d", clean_url, response.status_code)
        return response

    async def get_json(self, url: str, **kwargs: Any) -> Any:
        """Fetch a URL and decode the body as JSON.

        Returns whatever JSON value the server sent; callers validate the
        shape.

        Raises:
            NetworkError: The request failed or the body is not JSON.
        """
        response = await self.get(url, **kwargs)

        try:
            return response.json()
        except ValueError as exc:
            raise NetworkError(
                f"Invalid JSON response from {url}",
                url=url,
                response_body=response.text,
            ) from exc
