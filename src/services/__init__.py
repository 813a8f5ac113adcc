from config import Settings
from infrastructure.catalog import ProblemCatalog
from infrastructure.http_client import AsyncHTTPClient
from services.editor import AutocompleteSession, ProblemDraft
from services.proxy import ProxyResult, UpstreamProxy
from services.tracker import TrackerService, filter_problems


def create_tracker_service(
    settings: Settings,
    http_client: AsyncHTTPClient,
    storage=None,
) -> TrackerService:
    """Factory function to create tracker service with all dependencies."""
    from infrastructure.leetcode_client import LeetCodeApiClient
    from infrastructure.storage import create_storage

    return TrackerService(
        storage=storage if storage is not None else create_storage(settings),
        api_client=LeetCodeApiClient(http_client, settings.api_base),
        seed_samples=settings.seed_samples,
    )


def create_upstream_proxy(settings: Settings, http_client: AsyncHTTPClient) -> UpstreamProxy:
    """Factory function to create the upstream proxy."""
    return UpstreamProxy(http_client, settings.api_base)


def create_catalog(settings: Settings) -> ProblemCatalog:
    return ProblemCatalog.from_file(settings.catalog_path)


__all__ = [
    "AutocompleteSession",
    "ProblemDraft",
    "ProxyResult",
    "TrackerService",
    "UpstreamProxy",
    "create_catalog",
    "create_tracker_service",
    "create_upstream_proxy",
    "filter_problems",
]
