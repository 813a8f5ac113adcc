"""Editor state: the draft being edited and live autocomplete."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Awaitable, Callable, Generic, Iterable, Optional, Sequence, TypeVar

from loguru import logger

from domain.models import (
    CatalogEntry,
    Difficulty,
    ProblemDetail,
    ProblemRecord,
    RemoteMetadata,
    utc_now,
)
from domain.models.problem import new_problem_id
from infrastructure.parsers import DescriptionParser, URLParser

QUICK_TOPICS = (
    "Array",
    "String",
    "Hash Table",
    "DP",
    "Math",
    "Sorting",
    "Greedy",
    "DFS",
    "BFS",
    "Binary Search",
    "Two Pointers",
    "Stack",
    "Tree",
    "Graph",
    "Linked List",
    "Heap",
)
QUICK_TOPICS_MAX_TAGS = 3
SUGGESTION_LIMIT = 8


@dataclass
class ProblemDraft:
    """Unsaved form state for creating or editing a problem."""

    id: Optional[str] = None
    number: str = ""
    title: str = ""
    difficulty: str = Difficulty.EASY.value
    url: str = ""
    tags: list[str] = field(default_factory=list)
    description: str = ""
    notes: str = ""
    code: str = ""
    remote: Optional[RemoteMetadata] = None
    date_added: Optional[datetime] = None
    description_height: Optional[int] = None
    notes_height: Optional[int] = None

    @classmethod
    def blank(cls) -> "ProblemDraft":
        return cls()

    @classmethod
    def from_record(cls, record: ProblemRecord) -> "ProblemDraft":
        return cls(
            id=record.id,
            number=record.number,
            title=record.title,
            difficulty=record.difficulty.value,
            url=record.url,
            tags=list(record.tags),
            description=record.description,
            notes=record.notes,
            code=record.code,
            remote=record.remote,
            date_added=record.date_added,
            description_height=record.description_height,
            notes_height=record.notes_height,
        )

    def update(self, **changes: Any) -> None:
        """Set editable fields; unknown names raise AttributeError."""
        editable = {f.name for f in fields(self)} - {"id", "date_added"}
        for name, value in changes.items():
            if name not in editable:
                raise AttributeError(f"Unknown or read-only draft field: {name}")
            setattr(self, name, list(value) if name == "tags" else value)

    def add_tag(self, text: str) -> bool:
        """Add a trimmed tag; returns False for blanks and duplicates."""
        tag = text.strip()
        if not tag or tag in self.tags:
            return False
        self.tags.append(tag)
        return True

    def remove_tag(self, index: int) -> None:
        if 0 <= index < len(self.tags):
            del self.tags[index]

    def tag_suggestions(
        self, all_tags: Iterable[str], text: str, limit: int = SUGGESTION_LIMIT
    ) -> list[str]:
        """Known tags containing the typed text that are not on the draft yet."""
        query = text.strip().lower()
        if not query:
            return []
        matches = [t for t in all_tags if query in t.lower() and t not in self.tags]
        return matches[:limit]

    def quick_topics(self, limit: int = SUGGESTION_LIMIT) -> list[str]:
        """Common topics offered while the draft has only a few tags."""
        if len(self.tags) >= QUICK_TOPICS_MAX_TAGS:
            return []
        return [t for t in QUICK_TOPICS if t not in self.tags][:limit]

    def apply_catalog_entry(self, entry: CatalogEntry) -> None:
        """Fill number, title, difficulty, tags and URL from an autocomplete pick."""
        self.number = entry.frontend_id
        self.title = entry.title
        self.difficulty = entry.difficulty or self.difficulty
        self.tags = list(entry.tags)
        self.url = URLParser.build_problem_url(entry.title_slug)

    def apply_remote_detail(self, detail: ProblemDetail) -> None:
        """Fill the draft from a full remote problem, caching its metadata."""
        self.number = detail.frontend_id
        self.title = detail.title
        self.difficulty = detail.difficulty or self.difficulty
        self.url = URLParser.build_problem_url(detail.title_slug)
        for tag in detail.topic_tags:
            self.add_tag(tag)
        if detail.content and not self.description.strip():
            self.description = DescriptionParser.safe_to_text(detail.content)
        self.remote = RemoteMetadata.from_detail(detail)

    def to_record(self, now: Optional[datetime] = None) -> ProblemRecord:
        """
        Build the record to save.

        Raises:
            InvalidDifficultyError: If difficulty is not Easy, Medium or Hard
        """
        now = now or utc_now()
        date_added = self.date_added or now

        return ProblemRecord(
            id=self.id or new_problem_id(),
            number=self.number.strip(),
            title=self.title.strip() or "Untitled",
            difficulty=Difficulty.parse(self.difficulty or Difficulty.EASY),
            url=self.url.strip(),
            tags=list(self.tags),
            description=self.description,
            notes=self.notes,
            code=self.code,
            remote=self.remote,
            date_added=date_added,
            date_edited=max(now, date_added),
            description_height=self.description_height,
            notes_height=self.notes_height,
        )


T = TypeVar("T")


class AutocompleteSession(Generic[T]):
    """
    Search-as-you-type where the latest request wins.

    Each query gets a sequence number. A response is applied only if no newer
    query was issued while it was in flight, so a slow answer to an earlier
    keystroke never replaces predictions for a newer one.
    """

    def __init__(self, search: Callable[[str], Awaitable[Sequence[T]]]):
        self._search = search
        self._issued = 0
        self.predictions: list[T] = []

    @property
    def latest_sequence(self) -> int:
        return self._issued

    async def query(self, text: str) -> bool:
        """
        Run a search for the typed text.

        Returns:
            True if the results were applied, False if they were stale
        """
        self._issued += 1
        sequence = self._issued

        if not text.strip():
            self.predictions = []
            return True

        results = await self._search(text)

        if sequence != self._issued:
            logger.debug(f"Dropping stale autocomplete results for {text!r} (#{sequence})")
            return False

        self.predictions = list(results)
        return True

    def clear(self) -> None:
        self._issued += 1
        self.predictions = []
