"""Wren — a client-side URL router.

Maps location paths to route callbacks, extracts params from the path
and query string, and keeps host history in sync with an in-memory
"current route + params" state.

Basic usage::

    from wren import MemoryHistory, Router

    router = Router()
    show = router.define("/foos/:id", lambda params: print(params["id"]))
    router.start(MemoryHistory("/foos/1"))

    router.route(show)
    router.params({"id": 2})
    router.flush()
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "GenerationError",
    "Location",
    "MemoryHistory",
    "MissingParamError",
    "NavigationError",
    "NavigationSink",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "Unknown",
    "WrenError",
    "compile_pattern",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from wren.router import Router

        return Router

    if name == "RouterConfig":
        from wren.config import RouterConfig

        return RouterConfig

    if name in ("Location", "MemoryHistory", "NavigationSink"):
        from wren import sink as _sink

        return getattr(_sink, name)

    if name in ("Route", "RouteMatch", "Unknown"):
        from wren.routing import route as _route

        return getattr(_route, name)

    if name == "compile_pattern":
        from wren.routing.pattern import compile_pattern

        return compile_pattern

    if name in (
        "ConfigurationError",
        "GenerationError",
        "MissingParamError",
        "NavigationError",
        "WrenError",
    ):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
