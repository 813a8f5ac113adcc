"""Async HTTP client built on curl_cffi."""

from typing import Any, Optional

from curl_cffi.requests import AsyncSession
from loguru import logger

from infrastructure.errors import HTTPClientError

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "Mozilla/5.0",
}


class AsyncHTTPClient:
    """Thin wrapper around a lazily created curl_cffi AsyncSession."""

    def __init__(self, timeout: float = 15.0, headers: Optional[dict[str, str]] = None):
        """
        Initialize client.

        Args:
            timeout: Request timeout in seconds
            headers: Headers sent with every request
        """
        self.timeout = timeout
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}
        self._session: Optional[AsyncSession] = None

    def _get_session(self) -> AsyncSession:
        if self._session is None:
            self._session = AsyncSession(timeout=self.timeout, headers=self.headers)
        return self._session

    async def get(self, url: str, params: Optional[dict[str, Any]] = None):
        """
        Send a GET request and return the raw response, whatever its status.

        Raises:
            HTTPClientError: On transport failure
        """
        logger.debug(f"GET {url} params={params}")
        try:
            return await self._get_session().get(url, params=params)
        except Exception as e:
            raise HTTPClientError(url, reason=str(e)) from e

    async def post(self, url: str, json: Any = None, headers: Optional[dict[str, str]] = None):
        logger.debug(f"POST {url}")
        try:
            return await self._get_session().post(url, json=json, headers=headers)
        except Exception as e:
            raise HTTPClientError(url, reason=str(e)) from e

    async def get_json(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        """
        GET a URL and decode its JSON body.

        Raises:
            HTTPClientError: On transport failure or non-2xx status
            ValueError: If the body is not valid JSON
        """
        response = await self.get(url, params=params)
        if not 200 <= response.status_code < 300:
            raise HTTPClientError(url, status_code=response.status_code)
        return response.json()

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None
            logger.debug("HTTP session closed")
