"""Unit tests for the Redis storage backend."""

from unittest.mock import AsyncMock

import pytest

from infrastructure.storage import RedisStorage
from infrastructure.storage.codec import encode_records


@pytest.fixture
def redis_client():
    return AsyncMock()


@pytest.mark.asyncio
async def test_load_decodes_collection_under_key(redis_client, make_record):
    """Test that the collection is read from the configured key."""
    records = [make_record("1", "Two Sum"), make_record("2", "LRU Cache")]
    redis_client.get.return_value = encode_records(records)

    loaded = await RedisStorage(redis_client, key="leetTrackerData").load()

    redis_client.get.assert_awaited_once_with("leetTrackerData")
    assert loaded == records


@pytest.mark.asyncio
async def test_load_accepts_bytes_payload(redis_client, make_record):
    """Test that a bytes payload from a raw client is decoded."""
    redis_client.get.return_value = encode_records([make_record("1")]).encode("utf-8")

    loaded = await RedisStorage(redis_client).load()

    assert [r.id for r in loaded] == ["1"]


@pytest.mark.asyncio
async def test_non_utf8_bytes_payload_means_no_data(redis_client):
    """Test that a bytes payload that is not valid UTF-8 loads as no data."""
    redis_client.get.return_value = b"\xff\xfe[]"

    assert await RedisStorage(redis_client).load() == []


@pytest.mark.asyncio
async def test_missing_key_means_no_data(redis_client):
    """Test that a missing key loads as an empty collection."""
    redis_client.get.return_value = None

    assert await RedisStorage(redis_client).load() == []


@pytest.mark.asyncio
async def test_corrupt_payload_means_no_data(redis_client):
    """Test that invalid JSON under the key loads as no data."""
    redis_client.get.return_value = "[{broken"

    assert await RedisStorage(redis_client).load() == []


@pytest.mark.asyncio
async def test_read_error_means_no_data(redis_client):
    """Test that a Redis read error loads as no data."""
    redis_client.get.side_effect = ConnectionError("redis down")

    assert await RedisStorage(redis_client).load() == []


@pytest.mark.asyncio
async def test_save_writes_whole_collection(redis_client, make_record):
    """Test that save stores the whole encoded collection under the key."""
    records = [make_record("1")]

    await RedisStorage(redis_client, key="custom").save(records)

    redis_client.set.assert_awaited_once_with("custom", encode_records(records))


@pytest.mark.asyncio
async def test_write_error_is_swallowed(redis_client, make_record):
    """Test that a Redis write error is logged, not raised."""
    redis_client.set.side_effect = ConnectionError("redis down")

    await RedisStorage(redis_client).save([make_record("1")])


@pytest.mark.asyncio
async def test_close_closes_client(redis_client):
    """Test that close closes the Redis client."""
    await RedisStorage(redis_client).close()

    redis_client.aclose.assert_awaited_once()
