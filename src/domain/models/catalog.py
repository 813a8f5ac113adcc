from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CatalogEntry:
    """Lightweight problem summary used for local autocomplete."""

    frontend_id: str
    title: str
    title_slug: str
    difficulty: str
    tags: tuple[str, ...] = field(default_factory=tuple)
    paid_only: bool = False
    ac_rate: float = 0.0

    @property
    def url(self) -> str:
        return f"https://leetcode.com/problems/{self.title_slug}/"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CatalogEntry:
        """Build from either the LeetCode GraphQL shape or snake_case keys."""
        raw_tags = data.get("topicTags", data.get("tags", []))
        tags = tuple(t["name"] if isinstance(t, dict) else str(t) for t in raw_tags or [])

        return cls(
            frontend_id=str(data.get("frontendQuestionId", data.get("frontend_id", ""))),
            title=data.get("title", ""),
            title_slug=data.get("titleSlug", data.get("title_slug", "")),
            difficulty=data.get("difficulty", ""),
            tags=tags,
            paid_only=bool(data.get("paidOnly", data.get("paid_only", False))),
            ac_rate=float(data.get("acRate", data.get("ac_rate", 0.0)) or 0.0),
        )
