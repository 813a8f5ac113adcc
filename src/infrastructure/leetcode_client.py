"""Client for the public LeetCode problem data API."""

from typing import Optional
from urllib.parse import quote

from loguru import logger

from config import DEFAULT_API_BASE
from domain.models import ProblemDetail, SearchResult
from infrastructure.errors import HTTPClientError
from infrastructure.http_client import AsyncHTTPClient

MAX_SEARCH_RESULTS = 20


class LeetCodeApiClient:
    """Best-effort lookups; every failure turns into an empty result."""

    def __init__(self, http_client: AsyncHTTPClient, base_url: str = DEFAULT_API_BASE):
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    async def search_problems(self, query: str) -> list[SearchResult]:
        """Search problems by title or id, at most MAX_SEARCH_RESULTS results."""
        if not query.strip():
            return []

        url = f"{self.base_url}/search"
        try:
            data = await self.http_client.get_json(url, params={"query": query})
            if not isinstance(data, list):
                logger.warning(f"Unexpected search response type: {type(data).__name__}")
                return []
            return [SearchResult.from_api(item) for item in data[:MAX_SEARCH_RESULTS]]
        except (HTTPClientError, ValueError, AttributeError) as e:
            logger.error(f"Error searching LeetCode API for {query!r}: {e}")
            return []

    async def get_problem_details(self, identifier: str) -> Optional[ProblemDetail]:
        """Fetch a problem by frontend id or slug."""
        identifier = identifier.strip()
        if not identifier:
            return None
        return await self._fetch_detail(f"/problem/{quote(identifier, safe='')}")

    async def get_daily_challenge(self) -> Optional[ProblemDetail]:
        return await self._fetch_detail("/daily")

    async def get_random_problem(self) -> Optional[ProblemDetail]:
        return await self._fetch_detail("/random")

    async def _fetch_detail(self, path: str) -> Optional[ProblemDetail]:
        url = f"{self.base_url}{path}"
        try:
            data = await self.http_client.get_json(url)
        except HTTPClientError as e:
            if e.status_code == 404:
                logger.info(f"Problem not found: {url}")
            else:
                logger.error(f"Error fetching problem details from {url}: {e}")
            return None
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            return None

        # The daily endpoint wraps the problem in a "question" object
        if isinstance(data, dict) and isinstance(data.get("question"), dict):
            data = data["question"]

        try:
            detail = ProblemDetail.from_api(data)
        except (AttributeError, TypeError, ValueError, KeyError) as e:
            logger.error(f"Failed to parse problem details from {url}: {e}")
            return None

        logger.debug(f"Fetched problem {detail.frontend_id}. {detail.title}")
        return detail
