"""Parsers for extracting data from external sources."""

from .description_parser import DescriptionParser
from .interfaces import ParsingError, URLParserProtocol
from .url_parser import URLParser, URLParsingError, parse_problem_url

__all__ = [
    "DescriptionParser",
    "ParsingError",
    "URLParser",
    "URLParserProtocol",
    "URLParsingError",
    "parse_problem_url",
]
