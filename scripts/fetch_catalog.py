"""Refresh the local problem catalog used for autocomplete."""

import asyncio
import json
import sys
from pathlib import Path

# Add src to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

# ruff: noqa: E402
from dotenv import load_dotenv
from loguru import logger

from config import Settings
from infrastructure.errors import HTTPClientError
from infrastructure.http_client import AsyncHTTPClient

GRAPHQL_URL = "https://leetcode.com/graphql"

QUERY = """
  query problemsetQuestionList($categorySlug: String, $limit: Int, $skip: Int, $filters: QuestionListFilterInput) {
    problemsetQuestionList: questionList(
      categorySlug: $categorySlug
      limit: $limit
      skip: $skip
      filters: $filters
    ) {
      total: totalNum
      questions: data {
        acRate
        difficulty
        frontendQuestionId: questionFrontendId
        paidOnly: isPaidOnly
        title
        titleSlug
        topicTags {
          name
          id
          slug
        }
        hasSolution
        hasVideoSolution
      }
    }
  }
"""

# Enough to fetch every problem in one request
FETCH_LIMIT = 5000


async def fetch_catalog(http_client: AsyncHTTPClient) -> list[dict]:
    """Fetch all problem summaries from the LeetCode GraphQL endpoint."""
    payload = {
        "query": QUERY,
        "variables": {"categorySlug": "", "skip": 0, "limit": FETCH_LIMIT, "filters": {}},
    }
    response = await http_client.post(
        GRAPHQL_URL,
        json=payload,
        headers={"Content-Type": "application/json", "Referer": "https://leetcode.com"},
    )
    if not 200 <= response.status_code < 300:
        raise HTTPClientError(GRAPHQL_URL, status_code=response.status_code)

    data = response.json()
    question_list = (data.get("data") or {}).get("problemsetQuestionList")
    if not question_list:
        raise ValueError(f"Unexpected GraphQL response: {str(data)[:200]}")
    return question_list["questions"]


async def main():
    """Main entry point for the catalog refresh script."""
    load_dotenv()

    logger.remove()
    logger.add(sys.stderr, level="INFO")

    settings = Settings.from_env()
    output = Path(sys.argv[1]) if len(sys.argv) > 1 else settings.catalog_path

    http_client = AsyncHTTPClient(timeout=60.0)
    try:
        problems = await fetch_catalog(http_client)
    except (HTTPClientError, ValueError) as e:
        logger.error(f"Failed to fetch problems: {e}")
        sys.exit(1)
    finally:
        await http_client.close()

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(problems, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(f"Successfully saved {len(problems)} problems to {output}")


if __name__ == "__main__":
    asyncio.run(main())
