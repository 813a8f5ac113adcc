"""Storage backends for the problem collection."""

from loguru import logger

from config import Settings

from .file_storage import JsonFileStorage
from .interfaces import ProblemStorageProtocol
from .redis_storage import RedisStorage


def create_storage(settings: Settings) -> ProblemStorageProtocol:
    """Create the storage backend selected in settings."""
    if settings.storage_backend == "redis":
        logger.info(f"Using Redis storage at key {settings.storage_key}")
        return RedisStorage.from_url(settings.redis_url, settings.storage_key)

    legacy = None
    if settings.migrate_from_redis:
        legacy = RedisStorage.from_url(settings.redis_url, settings.storage_key)

    logger.info(f"Using file storage at {settings.data_file}")
    return JsonFileStorage(settings.data_file, legacy=legacy)


__all__ = [
    "JsonFileStorage",
    "ProblemStorageProtocol",
    "RedisStorage",
    "create_storage",
]
