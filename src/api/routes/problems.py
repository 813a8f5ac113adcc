"""API routes for tracked problems."""

from typing import Optional

from litestar import Controller, delete, get, post, put
from litestar.status_codes import HTTP_200_OK, HTTP_201_CREATED, HTTP_204_NO_CONTENT
from loguru import logger

from api.schemas.problem import ProblemPayload, ProblemResponse
from domain.exceptions import RemoteLookupError
from services import ProblemDraft, TrackerService


class ProblemController(Controller):
    """Controller for the problem list and editor."""

    path = "/api/problems"

    @get("/", status_code=HTTP_200_OK)
    async def list_problems(
        self,
        tracker: TrackerService,
        q: str = "",
        difficulty: Optional[str] = None,
    ) -> list[ProblemResponse]:
        """
        List problems, most recently edited first.

        Query parameters:
        - q: text matched against title, tags and number
        - difficulty: Easy, Medium, Hard or All
        """
        problems = tracker.list_problems(q, difficulty)
        return [ProblemResponse.model_validate(p) for p in problems]

    @get("/tags", status_code=HTTP_200_OK)
    async def list_tags(self, tracker: TrackerService) -> list[str]:
        return tracker.all_tags()

    @get("/{problem_id:str}", status_code=HTTP_200_OK)
    async def get_problem(self, tracker: TrackerService, problem_id: str) -> ProblemResponse:
        return ProblemResponse.model_validate(tracker.get(problem_id))

    @post("/", status_code=HTTP_201_CREATED)
    async def create_problem(
        self, tracker: TrackerService, data: ProblemPayload
    ) -> ProblemResponse:
        draft = ProblemDraft.blank()
        draft.update(**data.model_dump())
        record = await tracker.save_draft(draft)
        return ProblemResponse.model_validate(record)

    @put("/{problem_id:str}", status_code=HTTP_200_OK)
    async def update_problem(
        self, tracker: TrackerService, problem_id: str, data: ProblemPayload
    ) -> ProblemResponse:
        draft = ProblemDraft.from_record(tracker.get(problem_id))
        draft.update(**data.model_dump(exclude_unset=True))
        record = await tracker.save_draft(draft)
        return ProblemResponse.model_validate(record)

    @delete("/{problem_id:str}", status_code=HTTP_204_NO_CONTENT)
    async def delete_problem(self, tracker: TrackerService, problem_id: str) -> None:
        await tracker.delete(problem_id)

    @post("/import/{identifier:str}", status_code=HTTP_201_CREATED)
    async def import_problem(self, tracker: TrackerService, identifier: str) -> ProblemResponse:
        """
        Track a problem looked up on the remote API by frontend id or slug.
        """
        logger.debug(f"API request to import problem: identifier={identifier}")

        record = await tracker.import_remote(identifier)
        if record is None:
            raise RemoteLookupError(identifier)
        return ProblemResponse.model_validate(record)
