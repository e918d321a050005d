"""Tests for wren.cli._resolve — Router import resolution."""

import sys
import types

import pytest

from wren.cli._resolve import resolve_router
from wren.router import Router


def _factory() -> Router:
    return Router()


def _broken_factory() -> Router:
    msg = "no config"
    raise RuntimeError(msg)


def _wrong_factory() -> str:
    return "not a router"


@pytest.fixture
def _fake_router_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with a wren Router on sys.modules."""
    mod = types.ModuleType("_fake_wren_app")
    mod.router = Router()  # type: ignore[attr-defined]
    mod.custom = Router()  # type: ignore[attr-defined]
    mod.make_router = _factory  # type: ignore[attr-defined]
    mod.broken = _broken_factory  # type: ignore[attr-defined]
    mod.wrong = _wrong_factory  # type: ignore[attr-defined]
    mod.not_a_router = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_wren_app", mod)


@pytest.mark.usefixtures("_fake_router_module")
class TestResolveRouter:
    def test_explicit_attribute(self) -> None:
        assert isinstance(resolve_router("_fake_wren_app:custom"), Router)

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'router'."""
        router = resolve_router("_fake_wren_app")
        assert router is sys.modules["_fake_wren_app"].router

    def test_factory(self) -> None:
        assert isinstance(resolve_router("_fake_wren_app:make_router"), Router)

    def test_broken_factory(self) -> None:
        with pytest.raises(TypeError, match="raised an error: no config"):
            resolve_router("_fake_wren_app:broken")

    def test_factory_returning_wrong_type(self) -> None:
        with pytest.raises(TypeError, match=r"returned str, not a wren\.Router"):
            resolve_router("_fake_wren_app:wrong")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_router("nonexistent_module_xyz:router")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_router("_fake_wren_app:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match=r"not a wren\.Router instance"):
            resolve_router("_fake_wren_app:not_a_router")
