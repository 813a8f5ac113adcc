"""API routes for catalog autocomplete."""

from litestar import Controller, get
from litestar.status_codes import HTTP_200_OK

from api.schemas.catalog import CatalogEntryResponse
from domain.exceptions import ProblemNotFoundError
from infrastructure.catalog import DEFAULT_SEARCH_LIMIT, ProblemCatalog


class CatalogController(Controller):
    """Controller for searching the local problem catalog."""

    path = "/api/catalog"

    @get("/search", status_code=HTTP_200_OK)
    async def search_catalog(
        self,
        catalog: ProblemCatalog,
        q: str = "",
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> list[CatalogEntryResponse]:
        """Match q against problem titles and numbers."""
        return [CatalogEntryResponse.model_validate(e) for e in catalog.search(q, limit)]

    @get("/{identifier:str}", status_code=HTTP_200_OK)
    async def get_catalog_entry(
        self, catalog: ProblemCatalog, identifier: str
    ) -> CatalogEntryResponse:
        """Look up one catalog entry by frontend id or title slug."""
        entry = catalog.get(identifier) or catalog.get_by_slug(identifier)
        if entry is None:
            raise ProblemNotFoundError(identifier)
        return CatalogEntryResponse.model_validate(entry)
