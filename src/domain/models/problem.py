"""Problem record tracked by the user."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, Optional

from domain.exceptions import InvalidDifficultyError

from .remote import RemoteMetadata


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @classmethod
    def parse(cls, value: "Difficulty | str") -> "Difficulty":
        """Parse difficulty case-insensitively."""
        if isinstance(value, Difficulty):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        raise InvalidDifficultyError(value)


def utc_now() -> datetime:
    # Millisecond precision keeps in-memory values equal to their serialized form
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def format_timestamp(value: datetime) -> str:
    """Format as ISO-8601 UTC with milliseconds, e.g. 2024-05-01T10:00:00.000Z."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Trim tags, drop empty ones and duplicates, keep first-seen order."""
    result: list[str] = []
    for tag in tags:
        cleaned = str(tag).strip()
        if cleaned and cleaned not in result:
            result.append(cleaned)
    return result


def new_problem_id() -> str:
    return uuid.uuid4().hex


def _text_field(data: dict[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    if value is None or value == "":
        return default
    if not isinstance(value, str):
        raise ValueError(f"Field {key!r} must be a string, got {type(value).__name__}")
    return value


def _height_field(data: dict[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Field {key!r} must be a number, got {type(value).__name__}")
    return int(value)


@dataclass
class ProblemRecord:
    """Domain model for one tracked interview problem."""

    id: str
    title: str
    difficulty: Difficulty = Difficulty.EASY
    number: str = ""
    url: str = ""
    tags: list[str] = field(default_factory=list)
    description: str = ""
    notes: str = ""
    code: str = ""
    remote: Optional[RemoteMetadata] = None
    date_added: datetime = field(default_factory=utc_now)
    date_edited: datetime = field(default_factory=utc_now)
    description_height: Optional[int] = None
    notes_height: Optional[int] = None

    def __post_init__(self) -> None:
        self.difficulty = Difficulty.parse(self.difficulty)
        self.tags = normalize_tags(self.tags)
        if self.date_edited < self.date_added:
            self.date_edited = self.date_added

    def touch(self, now: Optional[datetime] = None) -> None:
        """Refresh the edited timestamp, never moving it before date_added."""
        self.date_edited = max(now or utc_now(), self.date_added)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "number": self.number,
            "title": self.title,
            "difficulty": self.difficulty.value,
            "url": self.url,
            "tags": list(self.tags),
            "description": self.description,
            "notes": self.notes,
            "code": self.code,
            "dateAdded": format_timestamp(self.date_added),
            "dateEdited": format_timestamp(self.date_edited),
            "descriptionHeight": self.description_height,
            "notesHeight": self.notes_height,
            "remote": self.remote.to_dict() if self.remote else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProblemRecord:
        if not data.get("id"):
            raise ValueError("Problem record without id")
        tags = data.get("tags") or []
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise ValueError("Field 'tags' must be a list of strings")

        date_added = parse_timestamp(data["dateAdded"]) if data.get("dateAdded") else utc_now()
        date_edited = parse_timestamp(data["dateEdited"]) if data.get("dateEdited") else date_added
        remote = data.get("remote")

        return cls(
            id=str(data["id"]),
            number=str(data.get("number") or ""),
            title=_text_field(data, "title", "Untitled"),
            difficulty=Difficulty.parse(data.get("difficulty") or Difficulty.EASY),
            url=_text_field(data, "url"),
            tags=tags,
            description=_text_field(data, "description"),
            notes=_text_field(data, "notes"),
            code=_text_field(data, "code"),
            remote=RemoteMetadata.from_dict(remote) if remote else None,
            date_added=date_added,
            date_edited=date_edited,
            description_height=_height_field(data, "descriptionHeight"),
            notes_height=_height_field(data, "notesHeight"),
        )
