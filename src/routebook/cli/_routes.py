"""``routebook routes`` — list routes in declaration order.

Loads the route source and prints a table of NAME, METHODS, PATH and
CONTROLLER, with the middleware appended when a route has one.
"""

import argparse

from routebook.cli._load import load_router


def run_routes(args: argparse.Namespace) -> None:
    router = load_router(args.source)

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    # Build rows: (name, methods_str, path, controller)
    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        methods_str = ", ".join(sorted(route.methods))
        controller = route.controller
        if route.middleware:
            controller = f"{controller} [{route.middleware}]"
        rows.append((route.name, methods_str, route.path, controller))

    # Column widths, never narrower than the headers
    max_name = max(max(len(r[0]) for r in rows), 4)
    max_methods = max(max(len(r[1]) for r in rows), 7)
    max_path = max(max(len(r[2]) for r in rows), 4)

    fmt = f"{{:<{max_name}}}  {{:<{max_methods}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("NAME", "METHODS", "PATH", "CONTROLLER"))
    sep_len = max_name + max_methods + max_path + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
