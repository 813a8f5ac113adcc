"""Parser for LeetCode problem URLs."""

import re
from urllib.parse import urlparse

from loguru import logger

from .interfaces import URLParserProtocol


class URLParsingError(ValueError):
    """Invalid URL format or unable to parse URL."""

    pass


class URLParser(URLParserProtocol):
    """Parser for LeetCode problem URL formats."""

    # Matches: leetcode.com/problems/two-sum/ and leetcode.cn/problems/two-sum/description/
    PATTERN = r"leetcode\.(?:com|cn)/problems/([a-z0-9]+(?:-[a-z0-9]+)*)"

    @classmethod
    def parse(cls, url: str) -> str:
        """
        Parse LeetCode problem URL and extract the problem slug.
        """
        logger.debug(f"Parsing URL: {url}")

        try:
            parsed = urlparse(url)
            if not parsed.scheme or not parsed.netloc:
                raise URLParsingError(f"Invalid URL format: {url}")
        except ValueError as e:
            raise URLParsingError(f"Failed to parse URL: {url}") from e

        match = re.search(cls.PATTERN, url.lower())
        if match:
            slug = match.group(1)
            logger.debug(f"Parsed URL to problem slug: {slug}")
            return slug

        raise URLParsingError(
            f"Unrecognized LeetCode URL format: {url}. "
            "Expected format: https://leetcode.com/problems/<slug>/"
        )

    @classmethod
    def build_problem_url(cls, slug: str) -> str:
        """
        Build canonical problem URL from slug.
        """
        url = f"https://leetcode.com/problems/{slug}/"

        logger.debug(f"Built problem URL: {url}")
        return url

    @classmethod
    def try_parse(cls, url: str) -> str | None:
        """Like parse, but returns None for anything that is not a problem URL."""
        if not url:
            return None
        try:
            return cls.parse(url)
        except URLParsingError:
            return None


def parse_problem_url(url: str) -> str:
    """Convenience wrapper around URLParser.parse."""
    return URLParser.parse(url)
