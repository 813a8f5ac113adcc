"""Durable JSON file backend."""

import asyncio
import os
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from domain.exceptions import StorageError
from domain.models import ProblemRecord

from .codec import decode_records, encode_records
from .interfaces import ProblemStorageProtocol


class JsonFileStorage:
    """Stores the collection as a human-readable JSON array in a single file."""

    def __init__(self, path: Path, legacy: Optional[ProblemStorageProtocol] = None):
        """
        Initialize storage.

        Args:
            path: Location of the data file
            legacy: Storage to migrate from when the data file does not exist yet
        """
        self.path = Path(path)
        self.legacy = legacy
        self._write_lock = asyncio.Lock()

    async def load(self) -> list[ProblemRecord]:
        if not self.path.exists():
            return await self._migrate_legacy()

        try:
            payload = await asyncio.to_thread(self.path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {self.path}: {e}")
            return []

        records = decode_records(payload, str(self.path))
        logger.info(f"Loaded {len(records)} problem(s) from {self.path}")
        return records

    async def save(self, records: Sequence[ProblemRecord]) -> None:
        # Serialized so that replaces land on disk in call order
        async with self._write_lock:
            payload = encode_records(records)
            try:
                await asyncio.to_thread(self._write_atomic, payload)
                logger.debug(f"Saved {len(records)} problem(s) to {self.path}")
            except StorageError as e:
                logger.error(f"Failed to save problems: {e}")

    async def close(self) -> None:
        if self.legacy is not None:
            await self.legacy.close()

    def _write_atomic(self, payload: str) -> None:
        """Write to a temp file in the same directory, then replace the target."""
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
        except (OSError, ValueError) as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Failed to write {self.path}: {e}") from e

    async def _migrate_legacy(self) -> list[ProblemRecord]:
        if self.legacy is None:
            logger.debug(f"No data file at {self.path}")
            return []

        logger.info(f"Data file {self.path} not found, checking legacy storage for migration")
        records = await self.legacy.load()
        if records:
            await self.save(records)
            logger.info(f"Migrated {len(records)} problem(s) to {self.path}")
        return records
