"""History reconciler — commits dirty navigation state to the sink.

``flush()`` generates the URL for the current route and params, then
chooses the write:

- path differs from the last committed path -> push (new history entry)
- only the query differs, or nothing does   -> replace (in place)
"""

import logging

from wren.config import RouterConfig
from wren.errors import NavigationError
from wren.routing.params import encode_query
from wren.routing.pattern import CompiledPattern, split_path
from wren.sink import HistoryOp, Location, NavigationSink
from wren.state import NavigationState

logger = logging.getLogger("wren.history")


def build_url(
    compiled: CompiledPattern,
    params: dict[str, str],
    *,
    encode: bool = True,
) -> tuple[str, str]:
    """Return ``(url, path)`` for *params* applied to *compiled*.

    Params not consumed by the pattern go to the query string; the
    ``?`` is omitted when there are none. *encode* controls
    percent-encoding of the query.
    Raises ``MissingParamError`` if a capture has no value.
    """
    generated = compiled.generate(params)
    query = encode_query(params, exclude=generated.consumed_keys, encode=encode)
    url = f"{generated.path}?{query}" if query else generated.path
    return url, generated.path


class HistoryReconciler:
    """Tracks the committed URL and writes dirty state to a sink.

    Paths are compared segment by segment the way the resolver reads
    them, so ``""`` equals ``"/"`` and, unless ``strict_slashes`` is set,
    ``"/foos/5/"`` equals ``"/foos/5"``.
    """

    __slots__ = ("_committed", "_config", "_state")

    def __init__(self, state: NavigationState, config: RouterConfig | None = None) -> None:
        self._state = state
        self._config = config or RouterConfig()
        self._committed: Location | None = None

    @property
    def committed(self) -> Location | None:
        """The location the host is known to show, if any."""
        return self._committed

    def commit_location(self, location: Location) -> None:
        """Record a location the host already shows (external navigation)."""
        self._committed = location

    def flush(self, sink: NavigationSink) -> HistoryOp | None:
        """Commit the state if dirty. Returns the write performed, if any.

        Raises ``NavigationError`` when dirty with no current route.
        Generation errors propagate and leave the state dirty.
        """
        if not self._state.dirty:
            return None

        route = self._state.route()
        if route is None:
            msg = "Cannot flush navigation state without a current route."
            raise NavigationError(msg)

        url, path = build_url(
            route.compiled, self._state.params(), encode=self._config.decode_query
        )
        op: HistoryOp
        if self._committed is None or not self._same_path(self._committed.path, path):
            sink.push_entry(url)
            op = "push"
        else:
            sink.replace_entry(url)
            op = "replace"

        logger.debug("%s %s", op, url)
        self._committed = Location.from_url(url)
        self._state.mark_clean()
        return op

    def _same_path(self, a: str, b: str) -> bool:
        strict = self._config.strict_slashes
        return split_path(a, strict_slashes=strict) == split_path(b, strict_slashes=strict)

    def reset(self) -> None:
        self._committed = None
