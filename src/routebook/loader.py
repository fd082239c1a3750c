"""YAML route files → ordered route records.

A route file holds a top-level ``routes`` sequence; each entry is a
single-key mapping from the route name to its fields::

    routes:
      - home:
          path: /
          controller: home_controller::index
          methods: get

The source may be one file or a directory, walked recursively in sorted
order so the resulting precedence is stable across platforms.
"""

import logging
from collections.abc import Iterator
from os import PathLike
from pathlib import Path
from typing import Any

import yaml

from routebook.config import RouterConfig
from routebook.errors import ConfigurationError, RouteFileError
from routebook.routing.table import RouteRecord

logger = logging.getLogger("routebook.loader")


def load_records(
    source: str | PathLike[str], config: RouterConfig | None = None
) -> list[RouteRecord]:
    """Read every route record under *source*, in declaration order.

    Raises ``RouteFileError`` when *source* does not exist or a file is not
    a valid route file.
    """
    config = config or RouterConfig()
    root = Path(source)
    if not root.exists():
        raise RouteFileError(str(root), "source path not found")

    records: list[RouteRecord] = []
    for path in _route_files(root, config.file_suffixes):
        records.extend(load_file(path))

    logger.info("%d route(s) parsed from %s", len(records), root)
    return records


def load_file(path: str | PathLike[str]) -> list[RouteRecord]:
    """Parse a single route file."""
    path = Path(path)
    logger.debug("Reading file %s", path)
    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RouteFileError(str(path), f"cannot read file: {exc}") from exc
    except yaml.YAMLError as exc:
        raise RouteFileError(str(path), f"invalid YAML: {exc}") from exc

    if document is None:
        return []
    return parse_document(document, str(path))


def parse_document(document: Any, source: str = "<string>") -> list[RouteRecord]:
    """Turn an already-deserialized route document into records."""
    if not isinstance(document, dict) or not isinstance(document.get("routes"), list):
        raise RouteFileError(source, 'expected a top-level "routes" sequence')

    records: list[RouteRecord] = []
    for index, entry in enumerate(document["routes"]):
        if not isinstance(entry, dict) or len(entry) != 1:
            raise RouteFileError(source, f"routes[{index}] must be a single-key mapping")
        ((name, fields),) = entry.items()
        if not isinstance(fields, dict):
            raise RouteFileError(source, f"route {name!r} must map to its fields")
        try:
            records.append(RouteRecord.from_mapping(str(name), fields))
        except ConfigurationError as exc:
            raise RouteFileError(source, str(exc)) from exc
    return records


def _route_files(root: Path, suffixes: tuple[str, ...]) -> Iterator[Path]:
    if root.is_file():
        yield root
        return

    logger.debug("Reading folder %s", root)
    for path in sorted(root.rglob("*")):
        if not path.is_file():
            continue
        if path.suffix.lower() in suffixes:
            yield path
        else:
            logger.debug("%s is skipped", path)
