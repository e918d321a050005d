"""Ordered route table.

Routes are tried in registration order and the first match wins, so
the order of ``define()`` calls is part of the routing contract.
"""

from wren.errors import ConfigurationError
from wren.routing.pattern import compile_pattern
from wren.routing.route import Route, RouteCallback, UnknownCallback


class RouteTable:
    """Registered routes plus the default route and unknown-path callback.

    Usage::

        table = RouteTable()
        index = table.define("/foos", show_foos)
        table.define("/", home, default=True)
        table.unknown(not_found)
    """

    __slots__ = ("_by_name", "_default", "_routes", "_unknown")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._by_name: dict[str, Route] = {}
        self._default: Route | None = None
        self._unknown: UnknownCallback | None = None

    def define(
        self,
        pattern: str,
        callback: RouteCallback,
        *,
        default: bool = False,
        name: str | None = None,
    ) -> Route:
        """Compile *pattern* and register it. Returns the new Route.

        Raises ``ConfigurationError`` for a malformed pattern, a second
        default route, or a duplicate route name.
        """
        if default and self._default is not None:
            msg = (
                f"Cannot define {pattern!r} as the default route: "
                f"{self._default.pattern!r} is already the default."
            )
            raise ConfigurationError(msg)
        if name is not None and name in self._by_name:
            msg = f"Route name {name!r} is already used by {self._by_name[name].pattern!r}."
            raise ConfigurationError(msg)

        route = Route(compiled=compile_pattern(pattern), callback=callback, default=default, name=name)
        self._routes.append(route)
        if name is not None:
            self._by_name[name] = route
        if default:
            self._default = route
        return route

    def unknown(self, callback: UnknownCallback | None) -> None:
        """Set the callback invoked with the raw path when nothing matches."""
        self._unknown = callback

    def reset(self) -> None:
        """Remove every route, the default and the unknown callback."""
        self._routes.clear()
        self._by_name.clear()
        self._default = None
        self._unknown = None

    def get(self, name: str) -> Route:
        """Return the route registered under *name*.

        Raises ``KeyError`` if no route has that name.
        """
        return self._by_name[name]

    @property
    def routes(self) -> tuple[Route, ...]:
        """All routes in registration order."""
        return tuple(self._routes)

    @property
    def default(self) -> Route | None:
        return self._default

    @property
    def unknown_callback(self) -> UnknownCallback | None:
        return self._unknown

    def __len__(self) -> int:
        return len(self._routes)
