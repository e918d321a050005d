"""Navigation sink — the host capability the router writes history to.

The router never touches a browser directly. A host supplies an object
satisfying ``NavigationSink``: it reports the current location, accepts
push/replace writes, and calls subscribed listeners (no payload) when
the location changes underneath the router (back/forward).

``MemoryHistory`` is a complete in-memory implementation for tests and
headless hosts.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal, Protocol, runtime_checkable

LocationListener = Callable[[], object]


@dataclass(frozen=True, slots=True)
class Location:
    """A path plus its query string (with or without the leading ``?``)."""

    path: str = "/"
    search: str = ""

    @classmethod
    def from_url(cls, url: str) -> "Location":
        """Split ``"/foos/5?a=1"`` into ``Location("/foos/5", "?a=1")``."""
        path, sep, query = url.partition("?")
        return cls(path=path, search=f"?{query}" if sep else "")

    @property
    def url(self) -> str:
        if not self.search or self.search == "?":
            return self.path
        if self.search.startswith("?"):
            return self.path + self.search
        return f"{self.path}?{self.search}"


@runtime_checkable
class NavigationSink(Protocol):
    """Capability interface supplied by the host environment."""

    def subscribe(self, listener: LocationListener) -> None: ...
    def unsubscribe(self, listener: LocationListener) -> None: ...
    def current_location(self) -> Location: ...
    def push_entry(self, url: str) -> None: ...
    def replace_entry(self, url: str) -> None: ...


HistoryOp = Literal["push", "replace"]


class MemoryHistory:
    """In-memory history stack implementing ``NavigationSink``.

    Records every push/replace made through the sink interface in
    ``writes`` as ``(op, url)`` pairs. ``back()``, ``forward()`` and
    ``visit()`` move the location the way a user would and notify
    listeners, like a browser ``popstate``; they are not recorded.

    Usage::

        history = MemoryHistory("/")
        router.start(history)
        history.visit("/foos/1?a=2")
        router.params({"a": "3"})
        router.flush()
        assert history.writes == [("replace", "/foos/1?a=3")]
    """

    __slots__ = ("_entries", "_index", "_listeners", "writes")

    def __init__(self, url: str = "/") -> None:
        self._entries: list[Location] = [Location.from_url(url)]
        self._index = 0
        self._listeners: list[LocationListener] = []
        self.writes: list[tuple[HistoryOp, str]] = []

    # -- NavigationSink ----------------------------------------------------

    def subscribe(self, listener: LocationListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: LocationListener) -> None:
        """Remove *listener*. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def current_location(self) -> Location:
        return self._entries[self._index]

    def push_entry(self, url: str) -> None:
        """Append a new entry, discarding any forward history."""
        self._append(url)
        self.writes.append(("push", url))

    def replace_entry(self, url: str) -> None:
        self._entries[self._index] = Location.from_url(url)
        self.writes.append(("replace", url))

    # -- user navigation ---------------------------------------------------

    def visit(self, url: str) -> None:
        """Navigate to *url* as the user would and notify listeners."""
        self._append(url)
        self._notify()

    def back(self) -> None:
        self.go(-1)

    def forward(self) -> None:
        self.go(1)

    def go(self, delta: int) -> None:
        """Move *delta* entries through the stack, clamped to its ends.

        Listeners fire only when the index actually moves.
        """
        index = max(0, min(len(self._entries) - 1, self._index + delta))
        if index == self._index:
            return
        self._index = index
        self._notify()

    # -- introspection -----------------------------------------------------

    @property
    def entries(self) -> tuple[str, ...]:
        """Every entry's URL, oldest first."""
        return tuple(entry.url for entry in self._entries)

    @property
    def listeners(self) -> tuple[LocationListener, ...]:
        return tuple(self._listeners)

    def __len__(self) -> int:
        return len(self._entries)

    def _append(self, url: str) -> None:
        del self._entries[self._index + 1 :]
        self._entries.append(Location.from_url(url))
        self._index += 1

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
