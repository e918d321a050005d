"""The router — one explicit context object per navigation session.

Owns a route table, the navigation state and the history reconciler.
``start(sink)`` binds it to a host; ``reset()`` unbinds it and clears
everything so the same object can be started again.

Usage::

    router = Router()
    foos = router.define("/foos/:id", show_foo)
    router.define("/", home, default=True)
    router.unknown(not_found)
    router.start(MemoryHistory("/"))

    router.route(foos)
    router.params({"id": 5, "tab": "info"})
    router.flush()          # push "/foos/5?tab=info"
"""

import logging
from collections.abc import Mapping

from wren.config import RouterConfig
from wren.errors import NavigationError
from wren.history import HistoryReconciler, build_url
from wren.routing.resolver import resolve
from wren.routing.route import Route, RouteCallback, RouteMatch, Unknown, UnknownCallback
from wren.routing.table import RouteTable
from wren.sink import Location, NavigationSink
from wren.state import NavigationState

logger = logging.getLogger("wren.router")


class Router:
    """Client-side URL router.

    External navigation (``handle_location_change``) resolves the
    location, updates the state and invokes the route callback.
    Programmatic navigation (``route``, ``params``) is silent: it only
    marks the state dirty until ``flush()`` writes it to history.
    """

    __slots__ = ("_config", "_history", "_sink", "_state", "_table")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._table = RouteTable()
        self._state = NavigationState()
        self._history = HistoryReconciler(self._state, self._config)
        self._sink: NavigationSink | None = None

    # -- lifecycle ----------------------------------------------------------

    def start(self, sink: NavigationSink) -> RouteMatch | Unknown:
        """Subscribe to *sink* and resolve its current location.

        Raises ``NavigationError`` if the router is already started.
        """
        if self._sink is not None:
            msg = "Router is already started; call reset() first."
            raise NavigationError(msg)
        self._sink = sink
        sink.subscribe(self.handle_location_change)
        location = sink.current_location()
        return self.handle_location_change(location.path, location.search)

    def reset(self) -> None:
        """Unsubscribe from the sink and clear routes, state and history memory."""
        if self._sink is not None:
            self._sink.unsubscribe(self.handle_location_change)
            self._sink = None
        self._table.reset()
        self._state.clear()
        self._history.reset()

    @property
    def started(self) -> bool:
        return self._sink is not None

    @property
    def config(self) -> RouterConfig:
        return self._config

    # -- route table --------------------------------------------------------

    def define(
        self,
        pattern: str,
        callback: RouteCallback,
        *,
        default: bool = False,
        name: str | None = None,
    ) -> Route:
        """Register a route. See ``RouteTable.define``."""
        return self._table.define(pattern, callback, default=default, name=name)

    def unknown(self, callback: UnknownCallback | None) -> None:
        """Set the callback invoked with the raw path when nothing matches."""
        self._table.unknown(callback)

    @property
    def routes(self) -> tuple[Route, ...]:
        return self._table.routes

    @property
    def table(self) -> RouteTable:
        return self._table

    # -- navigation state ---------------------------------------------------

    def route(self, new_route: Route | None = None) -> Route | None:
        """Return the current route, or set it (silently) when given one."""
        return self._state.route(new_route)

    def params(
        self,
        patch: Mapping[str, object | None] | None = None,
        replace: bool = False,
    ) -> dict[str, str]:
        """Return a copy of the current params, merging or replacing *patch* first."""
        return self._state.params(patch, replace)

    @property
    def dirty(self) -> bool:
        return self._state.dirty

    def url_for(self, route: Route | str, params: Mapping[str, object] | None = None) -> str:
        """Generate the URL for *route* (or a route name) without touching history.

        Raises ``MissingParamError`` if *params* lacks a capture key and
        ``KeyError`` for an unknown route name.
        """
        if isinstance(route, str):
            route = self._table.get(route)
        values = {k: str(v) for k, v in (params or {}).items() if v is not None}
        url, _ = build_url(route.compiled, values, encode=self._config.decode_query)
        return url

    def flush(self) -> None:
        """Commit dirty state to history as a push or a replace.

        Raises ``NavigationError`` if the router is not started or has
        no current route.
        """
        if self._sink is None:
            msg = "Router is not started; call start(sink) before flush()."
            raise NavigationError(msg)
        self._history.flush(self._sink)

    # -- external navigation ------------------------------------------------

    def handle_location_change(
        self,
        path: str | None = None,
        search: str | None = None,
    ) -> RouteMatch | Unknown:
        """Resolve a location the host already shows and dispatch it.

        Called by the sink with no arguments (re-reads the current
        location) or directly with explicit *path* and *search*.
        A match updates the state and invokes the route callback with
        the merged params. No match invokes the unknown callback with
        the raw path, or is dropped when none is registered.
        """
        if path is None or search is None:
            if self._sink is None:
                msg = "Router is not started; pass path and search explicitly."
                raise NavigationError(msg)
            location = self._sink.current_location()
            path = location.path if path is None else path
            search = location.search if search is None else search

        result = resolve(self._table, path, search, config=self._config)
        self._history.commit_location(Location(path=path, search=search))

        if isinstance(result, Unknown):
            callback = self._table.unknown_callback
            if callback is None:
                logger.debug("No route matches %r; dropped", path)
                return result
            logger.debug("No route matches %r", path)
            callback(result.path)
            return result

        logger.debug("%r matched %r with %r", path, result.route.pattern, result.params)
        self._state.apply(result.route, result.params)
        result.route.callback(dict(result.params))
        return result
