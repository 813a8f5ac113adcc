"""Protocol interfaces for parsers."""

from typing import Protocol


class URLParserProtocol(Protocol):
    """Protocol for URL parsing."""

    @classmethod
    def parse(cls, url: str) -> str:
        """Parse URL to extract problem slug."""
        ...

    @classmethod
    def build_problem_url(cls, slug: str) -> str:
        """Build problem URL from slug."""
        ...


class ParsingError(ValueError):
    """Error parsing HTML content."""

    pass
