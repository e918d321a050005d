"""Path + query resolution against a route table.

Resolution is a pure function of the table and the two input strings:

1. A default path (``""`` or ``"/"``) selects the default route, if any.
2. Otherwise routes are tried in registration order; first match wins.
3. Query params are merged underneath the path captures, so a query
   key never overwrites a named or splat capture.
4. No match yields ``Unknown(path)``.
"""

from wren.config import RouterConfig
from wren.routing.params import parse_search
from wren.routing.route import RouteMatch, Unknown
from wren.routing.table import RouteTable

_DEFAULT_CONFIG = RouterConfig()


def resolve(
    table: RouteTable,
    path: str,
    search: str = "",
    *,
    config: RouterConfig = _DEFAULT_CONFIG,
) -> RouteMatch | Unknown:
    """Resolve *path* and *search* to a ``RouteMatch`` or ``Unknown``."""
    default = table.default
    if default is not None and path in config.default_paths:
        return RouteMatch(route=default, params=_merge(search, {}, config))

    for route in table.routes:
        path_params = route.compiled.match(path, strict_slashes=config.strict_slashes)
        if path_params is not None:
            return RouteMatch(route=route, params=_merge(search, path_params, config))

    return Unknown(path=path)


def _merge(search: str, path_params: dict[str, str], config: RouterConfig) -> dict[str, str]:
    """Overlay *path_params* on the parsed query string."""
    params = parse_search(search, decode=config.decode_query)
    params.update(path_params)
    return params
