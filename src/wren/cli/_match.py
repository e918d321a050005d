"""``wren match`` — resolve a path against a router without side effects."""

import argparse
import json
import sys

from wren.cli._resolve import load_router
from wren.routing.resolver import resolve
from wren.routing.route import Unknown
from wren.sink import Location


def run_match(args: argparse.Namespace) -> None:
    """Resolve ``args.path`` and print the route pattern and params as JSON.

    Callbacks are not invoked and the router's state is untouched.
    Exits with code 1 when no route matches.
    """
    router = load_router(args)
    location = Location.from_url(args.path)
    result = resolve(router.table, location.path, location.search, config=router.config)

    if isinstance(result, Unknown):
        print(f"No route matches {result.path!r}", file=sys.stderr)
        raise SystemExit(1)

    payload = {
        "pattern": result.route.pattern,
        "name": result.route.name,
        "params": result.params,
    }
    print(json.dumps(payload, indent=2))
