"""Litestar application factory."""

from typing import Optional

from litestar import Litestar, Request, Response, get
from litestar.datastructures import State
from litestar.di import Provide
from loguru import logger

from api.dependencies import provide_catalog, provide_proxy, provide_tracker
from api.routes import CatalogController, ProblemController, ProxyController
from config import Settings
from domain.exceptions import TrackerError
from infrastructure.catalog import ProblemCatalog
from infrastructure.http_client import AsyncHTTPClient
from infrastructure.storage import ProblemStorageProtocol
from services import create_catalog, create_tracker_service, create_upstream_proxy


def tracker_error_handler(request: Request, exc: TrackerError) -> Response:
    logger.warning(f"{request.method} {request.url.path} failed: {exc.message}")
    return Response(content={"error": exc.message}, status_code=exc.status_code)


@get("/health", sync_to_thread=False)
def health(state: State) -> dict[str, object]:
    return {"status": "ok", "problems": len(state.tracker.problems)}


def create_app(
    settings: Optional[Settings] = None,
    *,
    storage: Optional[ProblemStorageProtocol] = None,
    http_client: Optional[AsyncHTTPClient] = None,
    catalog: Optional[ProblemCatalog] = None,
) -> Litestar:
    """
    Create the application.

    Args:
        settings: Settings, read from the environment when omitted
        storage: Storage backend overriding the configured one
        http_client: HTTP client shared by the API client and the proxy
        catalog: Catalog snapshot overriding the configured asset
    """
    settings = settings or Settings.from_env()

    async def on_startup(app: Litestar) -> None:
        client = http_client if http_client is not None else AsyncHTTPClient(settings.http_timeout)
        app.state.http_client = client
        app.state.catalog = catalog if catalog is not None else create_catalog(settings)
        app.state.proxy = create_upstream_proxy(settings, client)

        tracker = create_tracker_service(settings, client, storage=storage)
        await tracker.load()
        app.state.tracker = tracker
        logger.info("LeetTrack API started")

    async def on_shutdown(app: Litestar) -> None:
        await app.state.tracker.storage.close()
        await app.state.http_client.close()
        logger.info("LeetTrack API stopped")

    return Litestar(
        route_handlers=[ProblemController, CatalogController, ProxyController, health],
        dependencies={
            "tracker": Provide(provide_tracker, sync_to_thread=False),
            "proxy": Provide(provide_proxy, sync_to_thread=False),
            "catalog": Provide(provide_catalog, sync_to_thread=False),
        },
        exception_handlers={TrackerError: tracker_error_handler},
        on_startup=[on_startup],
        on_shutdown=[on_shutdown],
    )
