"""Source repository lookup via the CocoaPods search service.

For every pod the search endpoint is asked for a single result; the
``source.git`` field of that result is the pod's upstream repository.

Typical usage::

    async with HTTPClient(timeout=10) as http:
        resolver = SourceResolver(http)
        url = await resolver.resolve_source_url("AFNetworking")
        print(url)  # https://github.com/AFNetworking/AFNetworking.git

Every way a lookup can come up empty (transport error, no results, missing
field, unparsable URL) raises the same
:class:`~podreport.exceptions.SourceLookupError`, because callers handle
all of them identically.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from podreport.utils.http import HTTPClient
from podreport.utils.logger import get_logger
from podreport.exceptions import NetworkError, SourceLookupError
from podreport.constants import COCOAPODS_SEARCH_URL, SEARCH_RESULT_LIMIT

logger = get_logger("source_resolver")

__all__ = ["SourceResolver", "SourceLookupResult", "extract_git_source"]


@dataclass(frozen=True)
class SourceLookupResult:
    """Raw ``source.git`` value returned by the search service for one pod."""

    pod_name: str
    git: str

    def to_url(self) -> httpx.URL:
        """Parse :attr:`git` as an absolute URL.

        Raises:
            SourceLookupError: The value is not an absolute URL.
        """
        try:
            url = httpx.URL(self.git.strip())
        except (httpx.InvalidURL, ValueError, TypeError) as exc:
            raise SourceLookupError(
                f"Unparsable source URL {self.git!r}",
                pod_name=self.pod_name,
            ) from exc

        if not url.scheme or not url.host:
            raise SourceLookupError(
                f"Source URL {self.git!r} is not absolute",
                pod_name=self.pod_name,
            )
        return url


def extract_git_source(pod_name: str, payload: Any) -> SourceLookupResult:
    """Pull ``source.git`` out of a search response.

    The response must be a JSON array whose first element is an object
    with a ``source`` object holding a ``git`` string.

    Raises:
        SourceLookupError: The payload does not have that shape.
    """
    if not isinstance(payload, list) or not payload:
        raise SourceLookupError("No search results", pod_name=pod_name)

    result = payload[0]
    source = result.get("source") if isinstance(result, dict) else None
    git = source.get("git") if isinstance(source, dict) else None

    if not isinstance(git, str) or not git.strip():
        raise SourceLookupError("Search result has no source.git", pod_name=pod_name)

    return SourceLookupResult(pod_name=pod_name, git=git)


class SourceResolver:
    """Look up the upstream repository URL of a pod.

    Args:
        http_client: Shared :class:`HTTPClient`; its timeout and
            concurrency limit apply to every lookup.
        search_url: Search endpoint accepting ``query`` and ``amount``.
    """

    def __init__(
        self,
        http_client: HTTPClient,
        search_url: str = COCOAPODS_SEARCH_URL,
    ) -> None:
        self.http_client = http_client
        self.search_url = search_url

    async def lookup(self, pod_name: str) -> SourceLookupResult:
        """Query the search service and return the raw source entry."""
        try:
            payload = await self.http_client.get_json(
                self.search_url,
                params={"query": pod_name, "amount": SEARCH_RESULT_LIMIT},
            )
        except NetworkError as exc:
            raise SourceLookupError(
                f"Search request failed: {exc.message}",
                pod_name=pod_name,
            ) from exc

        return extract_git_source(pod_name, payload)

    async def resolve_source_url(self, pod_name: str) -> httpx.URL:
        """Return the parsed source-control URL for *pod_name*.

        Raises:
            SourceLookupError: No usable source URL was found.
        """
        result = await self.lookup(pod_name)
        url = result.to_url()
        logger.debug("Resolved %s -> %s", pod_name, url)
        return url
