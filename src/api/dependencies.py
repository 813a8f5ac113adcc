from litestar.datastructures import State

from infrastructure.catalog import ProblemCatalog
from services import TrackerService, UpstreamProxy


def provide_tracker(state: State) -> TrackerService:
    return state.tracker


def provide_proxy(state: State) -> UpstreamProxy:
    return state.proxy


def provide_catalog(state: State) -> ProblemCatalog:
    return state.catalog
