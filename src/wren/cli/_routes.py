"""``wren routes`` — list registered routes in match order."""

import argparse

from wren.cli._resolve import load_router


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATTERN, NAME and CALLBACK for ``args.router``.

    The default route is flagged with ``*``.
    """
    router = load_router(args)

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for route in routes:
        pattern = f"{route.pattern} *" if route.default else route.pattern
        callback_name = getattr(route.callback, "__name__", str(route.callback))
        rows.append((pattern, route.name or "-", callback_name))

    max_pattern = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header
    max_name = max(max(len(r[1]) for r in rows), 4)  # "NAME" header

    fmt = f"{{:<{max_pattern}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("PATTERN", "NAME", "CALLBACK"))
    sep_len = max_pattern + max_name + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for pattern, name, callback_name in rows:
        print(fmt.format(pattern, name, callback_name))
