"""``wren url`` — generate the URL for a named route."""

import argparse
import sys

from wren.cli._resolve import load_router
from wren.errors import GenerationError


def run_url(args: argparse.Namespace) -> None:
    """Print ``router.url_for(args.name, params)``.

    Params are given as ``key=value`` pairs. Exits with code 1 for an
    unknown route name, a malformed pair or a generation error.
    """
    router = load_router(args)

    params: dict[str, str] = {}
    for pair in args.params:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            print(f"Error: expected key=value, got {pair!r}", file=sys.stderr)
            raise SystemExit(1)
        params[key] = value

    try:
        url = router.url_for(args.name, params)
    except GenerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except KeyError as exc:
        print(f"Error: no route named {args.name!r}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(url)
