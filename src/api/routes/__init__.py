from api.routes.catalog import CatalogController
from api.routes.problems import ProblemController
from api.routes.proxy import ProxyController

__all__ = ["CatalogController", "ProblemController", "ProxyController"]
