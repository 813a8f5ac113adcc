import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from domain.models import Difficulty, ProblemRecord


@pytest.fixture
def problem_detail_payload():
    """Upstream /problem/{id} payload for Two Sum."""
    return {
        "id": "1",
        "frontend_id": "1",
        "title": "Two Sum",
        "title_slug": "two-sum",
        "url": "https://leetcode.com/problems/two-sum/",
        "content": "<p>Given an array of integers <code>nums</code>.</p>",
        "likes": 100,
        "dislikes": 5,
        "stats": json.dumps(
            {
                "totalAccepted": "10M",
                "totalSubmission": "20M",
                "totalAcceptedRaw": 10000000,
                "totalSubmissionRaw": 20000000,
                "acRate": "50.0%",
            }
        ),
        "similarQuestions": json.dumps(
            [{"title": "3Sum", "titleSlug": "3sum", "difficulty": "Medium"}]
        ),
        "hints": ["Use a hash map"],
        "topicTags": [{"name": "Array"}, {"name": "Hash Table"}],
        "difficulty": "Easy",
        "isPaidOnly": False,
        "solution": None,
        "categoryTitle": "Algorithms",
    }


@pytest.fixture
def make_record():
    """Factory for problem records with fixed timestamps."""

    def _make(record_id: str, title: str = "Problem", **kwargs) -> ProblemRecord:
        kwargs.setdefault("difficulty", Difficulty.EASY)
        kwargs.setdefault("date_added", datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))
        kwargs.setdefault("date_edited", datetime(2024, 1, 2, 12, 0, tzinfo=timezone.utc))
        return ProblemRecord(id=record_id, title=title, **kwargs)

    return _make


@pytest.fixture
def make_response():
    """Factory for upstream responses as returned by AsyncHTTPClient.get."""

    def _make(status_code: int = 200, payload=None) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = payload
        return response

    return _make


@pytest.fixture
def http_client():
    """HTTP client mock with async request methods."""
    client = MagicMock()
    client.get = AsyncMock()
    client.get_json = AsyncMock()
    client.close = AsyncMock()
    return client
