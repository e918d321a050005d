"""Tests for wren.state — navigation state and dirty tracking."""

from wren.routing.table import RouteTable
from wren.state import NavigationState


def _callback(params: dict[str, str]) -> None:
    pass


class TestRoute:
    def test_initially_empty(self) -> None:
        state = NavigationState()
        assert state.route() is None
        assert state.params() == {}
        assert state.dirty is False

    def test_set_marks_dirty(self) -> None:
        route = RouteTable().define("/foos", _callback)
        state = NavigationState()
        assert state.route(route) is route
        assert state.route() is route
        assert state.dirty is True


class TestParams:
    def test_read_does_not_mark_dirty(self) -> None:
        state = NavigationState()
        state.params()
        assert state.dirty is False

    def test_returns_copy(self) -> None:
        state = NavigationState()
        state.params({"a": "1"})
        state.params()["a"] = "changed"
        assert state.params() == {"a": "1"}

    def test_merge(self) -> None:
        state = NavigationState()
        state.params({"id": "1"})
        assert state.params({"id": "2", "foo": "bar"}) == {"id": "2", "foo": "bar"}
        assert state.dirty is True

    def test_none_deletes(self) -> None:
        state = NavigationState()
        state.params({"a": "b", "c": "d"})
        state.params({"a": None, "c": "d"})
        assert state.params() == {"c": "d"}

    def test_replace(self) -> None:
        state = NavigationState()
        state.params({"a": "b", "c": "d"})
        state.params({"x": "y"}, True)
        assert state.params() == {"x": "y"}

    def test_values_stored_as_strings(self) -> None:
        state = NavigationState()
        assert state.params({"id": 5}) == {"id": "5"}


class TestApplyAndClear:
    def test_apply_is_clean(self) -> None:
        route = RouteTable().define("/foos/:id", _callback)
        state = NavigationState()
        state.params({"pending": "edit"})
        state.apply(route, {"id": "1"})
        assert state.route() is route
        assert state.params() == {"id": "1"}
        assert state.dirty is False

    def test_mark_clean(self) -> None:
        state = NavigationState()
        state.params({"a": "1"})
        state.mark_clean()
        assert state.dirty is False
        assert state.params() == {"a": "1"}

    def test_clear(self) -> None:
        route = RouteTable().define("/foos", _callback)
        state = NavigationState()
        state.route(route)
        state.params({"a": "1"})
        state.clear()
        assert state.route() is None
        assert state.params() == {}
        assert state.dirty is False
