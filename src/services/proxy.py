"""Service relaying requests to the remote problem API."""

from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

from loguru import logger

from infrastructure.http_client import AsyncHTTPClient

INTERNAL_ERROR_STATUS = 500


@dataclass(frozen=True)
class ProxyResult:
    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class UpstreamProxy:
    """Forwards requests to a fixed upstream base URL and relays JSON bodies unchanged."""

    def __init__(self, http_client: AsyncHTTPClient, base_url: str):
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    async def forward(
        self,
        path: str,
        *,
        params: Optional[dict[str, str]] = None,
        not_ok_message: str,
        failure_message: str,
    ) -> ProxyResult:
        """
        Forward a GET request upstream.

        Args:
            path: Upstream path, already URL-encoded
            params: Query parameters
            not_ok_message: Error body text when upstream answers with a non-2xx status
            failure_message: Error body text when the request itself fails

        Returns:
            The upstream JSON with status 200, the upstream status with a generic
            error body, or status 500 when the call fails
        """
        url = f"{self.base_url}{path}"

        try:
            response = await self.http_client.get(url, params=params)

            if not 200 <= response.status_code < 300:
                logger.warning(f"Upstream {url} responded with {response.status_code}")
                return ProxyResult(response.status_code, {"error": not_ok_message})

            return ProxyResult(200, response.json())

        except Exception as e:
            logger.error(f"Error proxying request to {url}: {e}")
            return ProxyResult(INTERNAL_ERROR_STATUS, {"error": failure_message})

    async def daily(self) -> ProxyResult:
        return await self.forward(
            "/daily",
            not_ok_message="Failed to fetch daily",
            failure_message="Failed to fetch daily challenge",
        )

    async def problem(self, identifier: str) -> ProxyResult:
        return await self.forward(
            f"/problem/{quote(identifier, safe='')}",
            not_ok_message="Problem not found",
            failure_message="Failed to fetch problem",
        )

    async def random(self) -> ProxyResult:
        return await self.forward(
            "/random",
            not_ok_message="Failed to fetch random problem",
            failure_message="Failed to fetch random problem",
        )

    async def search(self, query: str) -> ProxyResult:
        return await self.forward(
            "/search",
            params={"query": query},
            not_ok_message="Search failed",
            failure_message="Failed to search",
        )
