"""``greeter routes`` — list the route table.

Prints every route in match order with its name, pattern, and the
controller method it dispatches to.
"""

import argparse

from greeter.cli._resolve import resolve_or_exit


def run_routes(args: argparse.Namespace) -> None:
    """Print a NAME / PATTERN / HANDLER table for ``args.app``."""
    app = resolve_or_exit(args)
    routes = app.router.routes
    if not routes:
        print("No routes registered.")
        return

    rows = [(route.name, route.pattern, route.controller.label) for route in routes]
    name_width = max(4, *(len(r[0]) for r in rows))
    pattern_width = max(7, *(len(r[1]) for r in rows))

    fmt = f"{{:<{name_width}}}  {{:<{pattern_width}}}  {{}}"
    print(fmt.format("NAME", "PATTERN", "HANDLER"))
    sep_len = name_width + pattern_width + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
