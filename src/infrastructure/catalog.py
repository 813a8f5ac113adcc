"""In-memory snapshot of the searchable problem catalog."""

import json
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from domain.models import CatalogEntry

DEFAULT_SEARCH_LIMIT = 10


class ProblemCatalog:
    """
    Catalog of problem summaries used for offline-friendly autocomplete.

    Built once at startup and handed to whoever needs it.
    """

    def __init__(self, entries: Iterable[CatalogEntry] = ()):
        self._entries = list(entries)
        self._by_id = {entry.frontend_id: entry for entry in self._entries}
        self._by_slug = {entry.title_slug: entry for entry in self._entries}

    @classmethod
    def from_file(cls, path: Path) -> "ProblemCatalog":
        """
        Load the catalog from a JSON array of problem summaries.

        A missing or unreadable file yields an empty catalog.
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load problem catalog from {path}: {e}")
            return cls()

        if not isinstance(data, list):
            logger.error(f"Problem catalog {path} is not a JSON array")
            return cls()

        entries = []
        for item in data:
            try:
                entries.append(CatalogEntry.from_dict(item))
            except (AttributeError, TypeError, ValueError, KeyError) as e:
                logger.warning(f"Skipping invalid catalog entry: {e}")

        logger.info(f"Loaded {len(entries)} catalog entries from {path}")
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def search(self, text: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[CatalogEntry]:
        """
        Find entries whose title or frontend id contains the query.

        Matching is case-insensitive and keeps catalog order. A blank query
        returns nothing.
        """
        query = text.strip().lower()
        if not query or limit <= 0:
            return []

        results = []
        for entry in self._entries:
            if query in entry.title.lower() or query in entry.frontend_id:
                results.append(entry)
                if len(results) >= limit:
                    break
        return results

    def get(self, frontend_id: str) -> Optional[CatalogEntry]:
        return self._by_id.get(str(frontend_id))

    def get_by_slug(self, slug: str) -> Optional[CatalogEntry]:
        return self._by_slug.get(slug)
