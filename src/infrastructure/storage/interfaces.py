"""Protocol interfaces for problem storage backends."""

from typing import Protocol, Sequence

from domain.models import ProblemRecord


class ProblemStorageProtocol(Protocol):
    """Persists the whole problem collection."""

    async def load(self) -> list[ProblemRecord]:
        """Load all records, or an empty list when there is no usable data."""
        ...

    async def save(self, records: Sequence[ProblemRecord]) -> None:
        """Overwrite stored state with the given records."""
        ...

    async def close(self) -> None:
        ...
