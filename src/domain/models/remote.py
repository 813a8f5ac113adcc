"""Value objects for data returned by the remote problem API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, List, Optional

from loguru import logger


@dataclass
class ProblemStats:
    total_accepted: str = ""
    total_submission: str = ""
    total_accepted_raw: int = 0
    total_submission_raw: int = 0
    ac_rate: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalAccepted": self.total_accepted,
            "totalSubmission": self.total_submission,
            "totalAcceptedRaw": self.total_accepted_raw,
            "totalSubmissionRaw": self.total_submission_raw,
            "acRate": self.ac_rate,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProblemStats:
        return cls(
            total_accepted=str(data.get("totalAccepted", "")),
            total_submission=str(data.get("totalSubmission", "")),
            total_accepted_raw=int(data.get("totalAcceptedRaw") or 0),
            total_submission_raw=int(data.get("totalSubmissionRaw") or 0),
            ac_rate=str(data.get("acRate", "")),
        )


@dataclass
class SimilarQuestion:
    title: str
    title_slug: str
    difficulty: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "titleSlug": self.title_slug, "difficulty": self.difficulty}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SimilarQuestion:
        return cls(
            title=data.get("title", ""),
            title_slug=data.get("titleSlug", data.get("title_slug", "")),
            difficulty=data.get("difficulty", ""),
        )


def parse_stats(raw: Any) -> Optional[ProblemStats]:
    """Parse the stats field, which upstream sends as a JSON-encoded string."""
    try:
        data = json.loads(raw) if isinstance(raw, str) else raw
        if not isinstance(data, dict):
            return None
        return ProblemStats.from_dict(data)
    except (TypeError, ValueError) as e:
        logger.debug(f"Failed to parse problem stats: {e}")
        return None


def parse_similar_questions(raw: Any) -> List[SimilarQuestion]:
    """Parse the similarQuestions field, also a JSON-encoded string upstream."""
    try:
        data = json.loads(raw) if isinstance(raw, str) else raw
        if not isinstance(data, list):
            return []
        return [SimilarQuestion.from_dict(item) for item in data if isinstance(item, dict)]
    except (TypeError, ValueError) as e:
        logger.debug(f"Failed to parse similar questions: {e}")
        return []


@dataclass
class SearchResult:
    id: str
    frontend_id: str
    title: str
    title_slug: str
    url: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> SearchResult:
        return cls(
            id=str(data.get("id", "")),
            frontend_id=str(data.get("frontend_id", "")),
            title=data.get("title", ""),
            title_slug=data.get("title_slug", ""),
            url=data.get("url", ""),
        )


@dataclass
class ProblemDetail:
    """Full problem payload from the remote API."""

    id: str
    frontend_id: str
    title: str
    title_slug: str
    url: str
    difficulty: str
    content: str = ""
    likes: int = 0
    dislikes: int = 0
    stats: Optional[ProblemStats] = None
    similar_questions: List[SimilarQuestion] = field(default_factory=list)
    hints: List[str] = field(default_factory=list)
    topic_tags: List[str] = field(default_factory=list)
    is_paid_only: bool = False
    category_title: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ProblemDetail:
        if not data.get("title") or not data.get("title_slug"):
            raise ValueError("Problem detail without title or slug")

        return cls(
            id=str(data.get("id", "")),
            frontend_id=str(data.get("frontend_id", "")),
            title=data["title"],
            title_slug=data["title_slug"],
            url=data.get("url") or f"https://leetcode.com/problems/{data['title_slug']}/",
            difficulty=data.get("difficulty", ""),
            content=data.get("content") or "",
            likes=int(data.get("likes") or 0),
            dislikes=int(data.get("dislikes") or 0),
            stats=parse_stats(data.get("stats")),
            similar_questions=parse_similar_questions(data.get("similarQuestions")),
            hints=list(data.get("hints") or []),
            topic_tags=[t["name"] for t in data.get("topicTags") or [] if t.get("name")],
            is_paid_only=bool(data.get("isPaidOnly", False)),
            category_title=data.get("categoryTitle") or "",
        )


@dataclass
class RemoteMetadata:
    """Remote data cached on a problem record."""

    content_html: str = ""
    hints: List[str] = field(default_factory=list)
    likes: int = 0
    dislikes: int = 0
    stats: Optional[ProblemStats] = None
    similar_questions: List[SimilarQuestion] = field(default_factory=list)
    is_paid_only: bool = False
    category: str = ""

    @classmethod
    def from_detail(cls, detail: ProblemDetail) -> RemoteMetadata:
        return cls(
            content_html=detail.content,
            hints=list(detail.hints),
            likes=detail.likes,
            dislikes=detail.dislikes,
            stats=detail.stats,
            similar_questions=list(detail.similar_questions),
            is_paid_only=detail.is_paid_only,
            category=detail.category_title,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "contentHtml": self.content_html,
            "hints": list(self.hints),
            "likes": self.likes,
            "dislikes": self.dislikes,
            "stats": self.stats.to_dict() if self.stats else None,
            "similarQuestions": [q.to_dict() for q in self.similar_questions],
            "isPaidOnly": self.is_paid_only,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RemoteMetadata:
        stats = data.get("stats")
        return cls(
            content_html=data.get("contentHtml", ""),
            hints=list(data.get("hints") or []),
            likes=int(data.get("likes") or 0),
            dislikes=int(data.get("dislikes") or 0),
            stats=ProblemStats.from_dict(stats) if stats else None,
            similar_questions=[
                SimilarQuestion.from_dict(q) for q in data.get("similarQuestions") or []
            ],
            is_paid_only=bool(data.get("isPaidOnly", False)),
            category=data.get("category", ""),
        )
