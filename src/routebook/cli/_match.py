"""``routebook match`` — resolve a request path to a route."""

import argparse
import sys

from routebook.cli._load import load_router


def run_match(args: argparse.Namespace) -> None:
    """Print the matched route, or explain why nothing matched.

    Exits with status 1 when no route accepts the path and method. When the
    path exists under other methods, those methods are listed.
    """
    router = load_router(args.source)

    found = router.match(args.path, args.method)
    if found is None:
        allowed = router.allowed_methods(args.path)
        if allowed:
            print(
                f"Method {args.method.lower()!r} not allowed for {args.path!r}. "
                f"Allowed methods: {', '.join(sorted(allowed))}",
                file=sys.stderr,
            )
        else:
            print(f"No route matches {args.path!r}.", file=sys.stderr)
        raise SystemExit(1)

    route = found.route
    print(f"name:       {route.name}")
    print(f"path:       {route.path}")
    print(f"controller: {route.controller}")
    print(f"middleware: {route.middleware}")
    print(f"methods:    {', '.join(sorted(route.methods))}")
    for key, value in found.path_params.items():
        print(f"param:      {key}={value}")
    if found.language:
        print(f"language:   {found.language}")
