"""Pydantic schemas for problem API endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from domain.models import Difficulty


class ProblemStatsResponse(BaseModel):
    """Acceptance statistics cached from the remote API."""

    total_accepted: str
    total_submission: str
    total_accepted_raw: int
    total_submission_raw: int
    ac_rate: str

    class Config:
        from_attributes = True


class SimilarQuestionResponse(BaseModel):
    title: str
    title_slug: str
    difficulty: str

    class Config:
        from_attributes = True


class RemoteMetadataResponse(BaseModel):
    """Remote data cached on a problem."""

    content_html: str
    hints: list[str]
    likes: int
    dislikes: int
    stats: Optional[ProblemStatsResponse] = None
    similar_questions: list[SimilarQuestionResponse]
    is_paid_only: bool
    category: str

    class Config:
        from_attributes = True


class ProblemPayload(BaseModel):
    """Editable fields of a problem, as sent by the editor."""

    number: str = ""
    title: str = ""
    difficulty: str = Difficulty.EASY.value
    url: str = ""
    tags: list[str] = Field(default_factory=list)
    description: str = ""
    notes: str = ""
    code: str = ""
    description_height: Optional[int] = None  # Text area heights in pixels
    notes_height: Optional[int] = None


class ProblemResponse(BaseModel):
    """Response containing a tracked problem."""

    id: str
    number: str
    title: str
    difficulty: Difficulty
    url: str
    tags: list[str]
    description: str
    notes: str
    code: str
    remote: Optional[RemoteMetadataResponse] = None
    date_added: datetime
    date_edited: datetime
    description_height: Optional[int] = None
    notes_height: Optional[int] = None

    class Config:
        from_attributes = True
