"""Infrastructure-level errors."""

from typing import Optional


class HTTPClientError(Exception):
    """Request failed at the transport level or returned a non-success status."""

    def __init__(self, url: str, status_code: Optional[int] = None, reason: str = ""):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        detail = f"HTTP {status_code}" if status_code is not None else reason or "request failed"
        super().__init__(f"{detail} for {url}")
