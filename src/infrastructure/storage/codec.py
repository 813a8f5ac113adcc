"""JSON encoding of the problem collection shared by all backends."""

import json
from typing import Sequence

from loguru import logger

from domain.models import ProblemRecord


def encode_records(records: Sequence[ProblemRecord]) -> str:
    return json.dumps([record.to_dict() for record in records], indent=2)


def decode_records(payload: str, source: str) -> list[ProblemRecord]:
    """
    Decode a stored collection.

    A document that is not a JSON array counts as no data. Records that
    fail to parse are skipped.
    """
    try:
        data = json.loads(payload)
    except ValueError as e:
        logger.error(f"Failed to parse stored problems from {source}: {e}")
        return []

    if not isinstance(data, list):
        logger.error(f"Stored problems in {source} are not a JSON array, ignoring")
        return []

    records: list[ProblemRecord] = []
    seen_ids: set[str] = set()
    for index, item in enumerate(data):
        try:
            record = ProblemRecord.from_dict(item)
        except Exception as e:
            logger.warning(f"Skipping invalid problem #{index} in {source}: {e}")
            continue

        if record.id in seen_ids:
            logger.warning(f"Skipping duplicate problem id {record.id} in {source}")
            continue

        seen_ids.add(record.id)
        records.append(record)

    return records
