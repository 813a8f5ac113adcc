"""Key-value backend keeping the whole collection under one Redis key."""

from typing import Sequence

from loguru import logger
from redis.asyncio import Redis

from domain.models import ProblemRecord

from .codec import decode_records, encode_records


class RedisStorage:
    """Stores the collection as a single JSON string, like browser local storage."""

    def __init__(self, client: Redis, key: str = "leetTrackerData"):
        self.client = client
        self.key = key

    @classmethod
    def from_url(cls, url: str, key: str = "leetTrackerData") -> "RedisStorage":
        return cls(Redis.from_url(url, decode_responses=True), key)

    async def load(self) -> list[ProblemRecord]:
        try:
            payload = await self.client.get(self.key)
        except Exception as e:
            logger.error(f"Failed to read problems from Redis key {self.key}: {e}")
            return []

        if not payload:
            logger.debug(f"No data under Redis key {self.key}")
            return []

        if isinstance(payload, bytes):
            try:
                payload = payload.decode("utf-8")
            except UnicodeDecodeError as e:
                logger.error(f"Problems under Redis key {self.key} are not valid UTF-8: {e}")
                return []

        records = decode_records(payload, f"redis:{self.key}")
        logger.info(f"Loaded {len(records)} problem(s) from Redis key {self.key}")
        return records

    async def save(self, records: Sequence[ProblemRecord]) -> None:
        try:
            await self.client.set(self.key, encode_records(records))
            logger.debug(f"Saved {len(records)} problem(s) to Redis key {self.key}")
        except Exception as e:
            logger.error(f"Failed to save problems to Redis key {self.key}: {e}")

    async def close(self) -> None:
        await self.client.aclose()
        logger.debug("Redis connection closed")
