# =============================================================================
# lib/fetcher.py - External Fetcher
# =============================================================================
# One outbound GET per call through httpx, following redirects. No retries
# and no timeout override: whatever httpx does by default is what the
# caller gets.
#
# Usage:
#   from lib.fetcher import ExternalFetcher
#   data = await ExternalFetcher().fetch_once("https://jsonplaceholder.typicode.com/todos/1")
# =============================================================================

import logging
from typing import Any

import httpx

from app.exceptions import FetchError


class ExternalFetcher:
    """
    Single-request HTTP client.

    A new AsyncClient is opened per call and closed when the call returns.
    Pass a transport (e.g. httpx.MockTransport) to keep tests off the network.
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
    ):
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)

    def _client(self) -> httpx.AsyncClient:
        if self.transport is not None:
            return httpx.AsyncClient(transport=self.transport, follow_redirects=True)
        return httpx.AsyncClient(follow_redirects=True)

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        content_type = response.headers.get("content-type", "")
        if "json" in content_type:
            try:
                return response.json()
            except ValueError:
                pass
        return response.text

    async def fetch_once(self, url: str) -> Any:
        """
        GET a URL once.

        Args:
            url: Absolute URL to fetch

        Returns:
            Decoded JSON when the response is JSON, the text body otherwise

        Raises:
            FetchError: On transport failure or a non-2xx status
        """
        try:
            async with self._client() as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                url,
                f"{e.response.status_code} {e.response.reason_phrase}",
                status=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e

        body = self._parse_body(response)
        self.logger.debug("Fetched URL", extra={"url": url, "status": response.status_code})
        return body
