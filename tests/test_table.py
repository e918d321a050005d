"""Tests for wren.routing.table — ordered route table."""

import pytest

from wren.errors import ConfigurationError
from wren.routing.table import RouteTable


def _callback(params: dict[str, str]) -> None:
    pass


class TestDefine:
    def test_returns_route(self) -> None:
        table = RouteTable()
        route = table.define("/foos/:id", _callback)
        assert route.pattern == "/foos/:id"
        assert route.callback is _callback
        assert table.routes == (route,)

    def test_registration_order(self) -> None:
        table = RouteTable()
        a = table.define("/a", _callback)
        b = table.define("/b", _callback)
        c = table.define("/c", _callback)
        assert table.routes == (a, b, c)
        assert len(table) == 3

    def test_default(self) -> None:
        table = RouteTable()
        assert table.default is None
        route = table.define("/bazs", _callback, default=True)
        assert route.default is True
        assert table.default is route

    def test_second_default_fails_at_define_time(self) -> None:
        table = RouteTable()
        table.define("/bazs", _callback, default=True)
        with pytest.raises(ConfigurationError, match="already the default"):
            table.define("/foos", _callback, default=True)
        assert len(table) == 1

    def test_malformed_pattern_not_registered(self) -> None:
        table = RouteTable()
        with pytest.raises(ConfigurationError):
            table.define("/foos/:id/:id", _callback)
        assert table.routes == ()

    def test_named_lookup(self) -> None:
        table = RouteTable()
        route = table.define("/foos", _callback, name="foos")
        assert table.get("foos") is route

    def test_unknown_name(self) -> None:
        with pytest.raises(KeyError):
            RouteTable().get("nope")

    def test_duplicate_name(self) -> None:
        table = RouteTable()
        table.define("/foos", _callback, name="foos")
        with pytest.raises(ConfigurationError, match="already used"):
            table.define("/bars", _callback, name="foos")

    def test_same_pattern_twice_gives_distinct_routes(self) -> None:
        table = RouteTable()
        a = table.define("/foos", _callback)
        b = table.define("/foos", _callback)
        assert a is not b


class TestUnknownAndReset:
    def test_unknown(self) -> None:
        table = RouteTable()
        assert table.unknown_callback is None
        table.unknown(print)
        assert table.unknown_callback is print

    def test_reset(self) -> None:
        table = RouteTable()
        table.define("/foos", _callback, default=True, name="foos")
        table.unknown(print)
        table.reset()
        assert table.routes == ()
        assert table.default is None
        assert table.unknown_callback is None
        # names and the default slot are free again
        table.define("/bars", _callback, default=True, name="foos")
