"""``routebook uri`` — build the URI of a named route."""

import argparse
import sys

from routebook.cli._load import load_router
from routebook.errors import UriGenerationError


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Turn ``["id=101", "lang=en"]`` into a mapping.

    Raises ``ValueError`` for an item without ``=``.
    """
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"Expected key=value, got {pair!r}"
            raise ValueError(msg)
        params[key] = value
    return params


def run_uri(args: argparse.Namespace) -> None:
    try:
        params = parse_params(args.params)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    router = load_router(args.source)
    try:
        uri = router.get_uri(args.name, params)
    except UriGenerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(uri)
