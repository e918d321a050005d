"""Navigation state — the current route and params of one router.

Programmatic edits (``route()``, ``params()``) mark the state dirty
until the history reconciler commits it. External navigation goes
through ``apply()``, which leaves it clean because the host already
shows that location.
"""

from collections.abc import Mapping

from wren.routing.params import merge_params
from wren.routing.route import Route


class NavigationState:
    """Current route, current params and the dirty flag."""

    __slots__ = ("_dirty", "_params", "_route")

    def __init__(self) -> None:
        self._route: Route | None = None
        self._params: dict[str, str] = {}
        self._dirty = False

    def route(self, new_route: Route | None = None) -> Route | None:
        """Return the current route, or set it when *new_route* is given.

        Setting a route never invokes its callback.
        """
        if new_route is not None:
            self._route = new_route
            self._dirty = True
        return self._route

    def params(
        self,
        patch: Mapping[str, object | None] | None = None,
        replace: bool = False,
    ) -> dict[str, str]:
        """Return a copy of the current params, applying *patch* first if given.

        Merges by default; ``None`` values delete their key. With
        *replace*, the current params are discarded.
        """
        if patch is not None:
            self._params = merge_params(self._params, patch, replace=replace)
            self._dirty = True
        return dict(self._params)

    def apply(self, route: Route, params: Mapping[str, str]) -> None:
        """Adopt a resolved location. Discards any uncommitted edits."""
        self._route = route
        self._params = dict(params)
        self._dirty = False

    def mark_clean(self) -> None:
        self._dirty = False

    def clear(self) -> None:
        self._route = None
        self._params = {}
        self._dirty = False

    @property
    def dirty(self) -> bool:
        return self._dirty
