"""Same-origin proxy routes for the remote problem API."""

from typing import Annotated, Any, Optional

from litestar import Controller, Response, get
from litestar.params import Parameter
from litestar.status_codes import HTTP_400_BAD_REQUEST
from loguru import logger

from services import ProxyResult, UpstreamProxy


def _relay(result: ProxyResult) -> Response[Any]:
    return Response(content=result.body, status_code=result.status_code)


class ProxyController(Controller):
    """Relays upstream JSON bodies unchanged."""

    path = "/api"

    @get("/daily")
    async def daily(self, proxy: UpstreamProxy) -> Response[Any]:
        return _relay(await proxy.daily())

    @get("/problem/{identifier:str}")
    async def problem(self, proxy: UpstreamProxy, identifier: str) -> Response[Any]:
        return _relay(await proxy.problem(identifier))

    @get("/random")
    async def random(self, proxy: UpstreamProxy) -> Response[Any]:
        return _relay(await proxy.random())

    @get("/search")
    async def search(
        self,
        proxy: UpstreamProxy,
        search_query: Annotated[Optional[str], Parameter(query="query")] = None,
    ) -> Response[Any]:
        if not search_query:
            logger.debug("Search proxy called without query parameter")
            return Response(
                content={"error": "Query parameter required"},
                status_code=HTTP_400_BAD_REQUEST,
            )
        return _relay(await proxy.search(search_query))
