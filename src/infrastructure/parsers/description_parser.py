"""Converts problem statement HTML into editable plain text."""

import re

from bs4 import BeautifulSoup
from loguru import logger

from .interfaces import ParsingError

_BLOCK_TAGS = ["p", "div", "pre", "ul", "ol", "li", "h1", "h2", "h3", "h4", "blockquote"]


class DescriptionParser:
    """Parser for problem statement HTML returned by the remote API."""

    @staticmethod
    def to_text(html: str) -> str:
        """
        Convert statement HTML to plain text.

        Paragraph breaks are kept as blank lines, list items get a "- "
        prefix, superscripts are written as ^n.
        """
        if not html or not html.strip():
            return ""

        try:
            soup = BeautifulSoup(html, "lxml")
        except Exception as e:
            logger.error(f"Failed to parse description HTML: {e}")
            raise ParsingError(f"Failed to parse description HTML: {e}") from e

        for sup in soup.find_all("sup"):
            sup.replace_with(f"^{sup.get_text()}")

        for br in soup.find_all("br"):
            br.replace_with("\n")

        for li in soup.find_all("li"):
            li.insert(0, "- ")

        for tag in soup.find_all(_BLOCK_TAGS):
            tag.insert_before("\n\n")
            tag.insert_after("\n\n")

        text = soup.get_text()
        text = text.replace("\xa0", " ")
        text = re.sub(r"[ \t]+\n", "\n", text)
        text = re.sub(r"\n{3,}", "\n\n", text)
        return text.strip()

    @classmethod
    def safe_to_text(cls, html: str) -> str:
        """Like to_text, but falls back to the raw HTML when parsing fails."""
        try:
            return cls.to_text(html)
        except ParsingError:
            return html
