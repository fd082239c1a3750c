"""Router loading shared by every subcommand."""

import sys

from routebook.errors import ConfigurationError
from routebook.routing.router import Router


def load_router(source: str) -> Router:
    """Build a router from *source*, exiting with status 1 on any configuration error."""
    try:
        return Router.from_path(source)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
