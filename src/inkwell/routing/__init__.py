"""Route derivation."""

from inkwell.routing.exceptions import DuplicateRouteError, RoutingError
from inkwell.routing.routes import derive_routes, route_path
from inkwell.routing.slugs import index_by_slug

__all__ = ["DuplicateRouteError", "RoutingError", "derive_routes", "index_by_slug", "route_path"]
