"""Service owning the in-memory problem collection."""

from typing import Iterable, Optional

from loguru import logger

from domain.exceptions import ProblemNotFoundError
from domain.models import Difficulty, ProblemRecord, RemoteMetadata, utc_now
from infrastructure.leetcode_client import LeetCodeApiClient
from infrastructure.parsers import URLParser
from infrastructure.storage import ProblemStorageProtocol
from services.editor import ProblemDraft
from services.samples import sample_problems


def filter_problems(
    problems: Iterable[ProblemRecord],
    text: str = "",
    difficulty: Optional[str] = None,
) -> list[ProblemRecord]:
    """
    Filter problems for the list view.

    Text matches title, tags and number case-insensitively. A difficulty of
    None or "All" matches everything. Most recently edited first.
    """
    query = text.strip().lower()
    wanted = None if difficulty in (None, "", "All") else Difficulty.parse(difficulty)

    def matches(problem: ProblemRecord) -> bool:
        haystack = " ".join([problem.title, *problem.tags, problem.number]).lower()
        if query and query not in haystack:
            return False
        return wanted is None or problem.difficulty == wanted

    return sorted(
        (p for p in problems if matches(p)),
        key=lambda p: p.date_edited,
        reverse=True,
    )


class TrackerService:
    """Service for managing tracked problems."""

    def __init__(
        self,
        *,
        storage: ProblemStorageProtocol,
        api_client: Optional[LeetCodeApiClient] = None,
        seed_samples: bool = False,
    ):
        """Initialize service with dependencies."""
        self.storage = storage
        self.api_client = api_client
        self.seed_samples = seed_samples
        self._problems: list[ProblemRecord] = []

    @property
    def problems(self) -> list[ProblemRecord]:
        return list(self._problems)

    async def load(self) -> list[ProblemRecord]:
        """Load the collection from storage, seeding samples when it is empty."""
        problems = await self.storage.load()

        if not problems and self.seed_samples:
            logger.info("No stored problems, seeding sample problems")
            problems = sample_problems()
            await self.storage.save(problems)

        self._problems = list(problems)
        logger.info(f"Tracker loaded with {len(self._problems)} problem(s)")
        return self.problems

    def list_problems(
        self, text: str = "", difficulty: Optional[str] = None
    ) -> list[ProblemRecord]:
        return filter_problems(self._problems, text, difficulty)

    def get(self, problem_id: str) -> ProblemRecord:
        """
        Raises:
            ProblemNotFoundError: If no problem has this id
        """
        for problem in self._problems:
            if problem.id == problem_id:
                return problem
        raise ProblemNotFoundError(problem_id)

    def all_tags(self) -> list[str]:
        """Distinct tags over all problems, in first-seen order."""
        tags: dict[str, None] = {}
        for problem in self._problems:
            for tag in problem.tags:
                tags.setdefault(tag, None)
        return list(tags)

    async def save_problem(self, record: ProblemRecord) -> ProblemRecord:
        """Insert or replace a problem by id, then persist the collection."""
        for index, existing in enumerate(self._problems):
            if existing.id == record.id:
                self._problems[index] = record
                logger.debug(f"Updated problem {record.id}")
                break
        else:
            self._problems.append(record)
            logger.debug(f"Added problem {record.id}")

        await self.storage.save(list(self._problems))
        logger.info(f"Saved problem {record.id}: {record.title}")
        return record

    async def save_draft(self, draft: ProblemDraft) -> ProblemRecord:
        """Build a record from the draft, stamping edit time, and save it."""
        return await self.save_problem(draft.to_record())

    async def delete(self, problem_id: str) -> bool:
        """Remove one problem. Unknown ids are a no-op and return False."""
        remaining = [p for p in self._problems if p.id != problem_id]
        if len(remaining) == len(self._problems):
            logger.debug(f"Delete ignored, no problem with id {problem_id}")
            return False

        self._problems = remaining
        await self.storage.save(list(self._problems))
        logger.info(f"Deleted problem {problem_id}")
        return True

    async def import_remote(self, identifier: str) -> Optional[ProblemRecord]:
        """
        Create a problem from the remote API, or refresh the cached remote
        data of a problem already tracked with the same URL.

        Returns:
            The saved record, or None if the lookup failed
        """
        if self.api_client is None:
            logger.warning("Remote import requested but no API client is configured")
            return None

        detail = await self.api_client.get_problem_details(identifier)
        if detail is None:
            return None

        existing = self._find_by_slug(detail.title_slug)
        if existing is not None:
            existing.remote = RemoteMetadata.from_detail(detail)
            if not existing.number:
                existing.number = detail.frontend_id
            existing.touch(utc_now())
            logger.info(f"Refreshed remote data for problem {existing.id}")
            return await self.save_problem(existing)

        draft = ProblemDraft.blank()
        draft.apply_remote_detail(detail)
        return await self.save_draft(draft)

    def _find_by_slug(self, slug: str) -> Optional[ProblemRecord]:
        for problem in self._problems:
            if URLParser.try_parse(problem.url) == slug:
                return problem
        return None
