"""Domain models package."""

from .catalog import CatalogEntry
from .problem import Difficulty, ProblemRecord, normalize_tags, utc_now
from .remote import (
    ProblemDetail,
    ProblemStats,
    RemoteMetadata,
    SearchResult,
    SimilarQuestion,
)

__all__ = [
    "CatalogEntry",
    "Difficulty",
    "ProblemDetail",
    "ProblemRecord",
    "ProblemStats",
    "RemoteMetadata",
    "SearchResult",
    "SimilarQuestion",
    "normalize_tags",
    "utc_now",
]
