"""Route and resolution outcome frozen dataclasses."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from wren.routing.pattern import CompiledPattern

RouteCallback = Callable[[dict[str, str]], Any]
UnknownCallback = Callable[[str], Any]


@dataclass(frozen=True, slots=True, eq=False)
class Route:
    """A registered route.

    Created by ``define()``. Routes compare by identity, not by pattern
    string: ``route()`` accepts and returns the object itself.
    """

    compiled: CompiledPattern
    callback: RouteCallback
    default: bool = False
    name: str | None = None

    @property
    def pattern(self) -> str:
        return self.compiled.pattern

    def __repr__(self) -> str:
        flags = " default" if self.default else ""
        return f"<Route {self.pattern!r}{flags}>"


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful resolution."""

    route: Route
    params: dict[str, str]


@dataclass(frozen=True, slots=True)
class Unknown:
    """Resolution outcome when no route matches *path*."""

    path: str
