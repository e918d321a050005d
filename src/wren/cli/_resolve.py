"""Locate the Router a ``wren`` subcommand operates on."""

import argparse
import pkgutil
import sys

from wren.router import Router


def resolve_router(import_string: str) -> Router:
    """Import ``"package.module:attr"`` and return the Router it names.

    *attr* defaults to ``router``. A zero-argument factory is called
    and must return a Router.

    Raises ``ModuleNotFoundError`` or ``AttributeError`` when the target
    cannot be found, ``TypeError`` when it is not a Router.
    """
    if ":" not in import_string:
        import_string = f"{import_string}:router"
    target = pkgutil.resolve_name(import_string)

    if isinstance(target, Router):
        return target
    if not callable(target):
        msg = f"{import_string!r} is a {type(target).__name__}, not a wren.Router instance"
        raise TypeError(msg)

    try:
        router = target()
    except Exception as exc:
        msg = f"Factory {import_string!r} raised an error: {exc}"
        raise TypeError(msg) from exc
    if not isinstance(router, Router):
        msg = f"Factory {import_string!r} returned {type(router).__name__}, not a wren.Router instance"
        raise TypeError(msg)
    return router


def load_router(args: argparse.Namespace) -> Router:
    """Resolve ``args.router`` or exit with status 1 and a message on stderr."""
    try:
        return resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
