"""Route records and the ordered, immutable route table.

Records are the already-parsed input (from YAML or built by hand). The table
normalizes and validates them into ``Route`` objects, keeping declaration
order because that order is the matching precedence.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from routebook.config import RouterConfig
from routebook.errors import (
    ConfigurationError,
    DuplicateRouteName,
    EmptyMethodList,
    UndeclaredPlaceholderRequirement,
)
from routebook.routing.route import Route

logger = logging.getLogger("routebook.table")


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """One route definition before normalization.

    ``methods`` is the comma-separated string from the route file
    (``"get, post"``); an iterable of method strings is accepted too.
    """

    name: str
    path: str
    controller: str
    methods: str | Iterable[str] = ""
    middleware: str = ""
    requirements: Mapping[str, str] = field(default_factory=dict)
    language: str = ""

    @classmethod
    def from_mapping(cls, name: str, fields: Mapping[str, Any]) -> "RouteRecord":
        """Build a record from a ``name: {path: ..., ...}`` entry.

        Missing optional fields take their defaults; ``None`` values (an empty
        YAML key) count as missing.
        """
        for key in ("path", "controller"):
            if fields.get(key) is None:
                msg = f"Route {name!r} is missing required field {key!r}."
                raise ConfigurationError(msg)

        for key in ("middleware", "language"):
            if not isinstance(fields.get(key) or "", str):
                msg = f"Route {name!r}: {key!r} must be a string."
                raise ConfigurationError(msg)

        requirements = fields.get("requirements") or {}
        if not isinstance(requirements, Mapping):
            msg = f"Route {name!r}: 'requirements' must map placeholders to patterns."
            raise ConfigurationError(msg)

        return cls(
            name=name,
            path=str(fields["path"]),
            controller=str(fields["controller"]),
            methods=_check_methods(name, fields.get("methods") or ""),
            middleware=fields.get("middleware") or "",
            requirements={str(k): str(v) for k, v in requirements.items()},
            language=fields.get("language") or "",
        )


def _check_methods(route: str, methods: object) -> str | Iterable[str]:
    """Return *methods* unchanged if it is a string or a list of strings."""
    if isinstance(methods, str):
        return methods
    if isinstance(methods, (list, tuple, set, frozenset)) and all(
        isinstance(m, str) for m in methods
    ):
        return methods
    msg = f"Route {route!r}: 'methods' must be a string or a list of strings."
    raise ConfigurationError(msg)


def normalize_methods(methods: str | Iterable[str]) -> frozenset[str]:
    """Split, trim and lower-case a method declaration.

    ``"GET, post,"`` -> ``frozenset({"get", "post"})``
    """
    if isinstance(methods, str):
        methods = methods.split(",")
    return frozenset(m.strip().lower() for m in methods if m and m.strip())


class RouteTable:
    """Ordered collection of routes with an O(1) name index.

    Build with ``RouteTable.build(records)``; immutable afterwards.
    """

    __slots__ = ("_by_name", "_routes")

    def __init__(self, routes: Iterable[Route] = ()) -> None:
        self._routes: tuple[Route, ...] = ()
        self._by_name: dict[str, Route] = {}

        ordered: list[Route] = []
        for route in routes:
            if route.name in self._by_name:
                raise DuplicateRouteName(route.name)
            self._by_name[route.name] = route
            ordered.append(route)
        self._routes = tuple(ordered)

    @classmethod
    def build(
        cls,
        records: Iterable[RouteRecord | Mapping[str, Any]],
        config: RouterConfig | None = None,
    ) -> "RouteTable":
        """Normalize and validate *records* into a table.

        Raises ``DuplicateRouteName``, ``EmptyMethodList``,
        ``UndeclaredPlaceholderRequirement`` or ``InvalidPathTemplate``.
        """
        config = config or RouterConfig()
        routes = [_to_route(_as_record(record), config) for record in records]
        table = cls(routes)
        logger.debug("Built route table with %d route(s)", len(table))
        return table

    def find_by_name(self, name: str) -> Route | None:
        return self._by_name.get(name)

    def iter_in_order(self) -> Iterator[Route]:
        """Yield routes in declaration order, which is the matching precedence."""
        return iter(self._routes)

    @property
    def routes(self) -> tuple[Route, ...]:
        return self._routes

    def __iter__(self) -> Iterator[Route]:
        return self.iter_in_order()

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"<RouteTable {len(self)} route(s)>"


def _as_record(record: RouteRecord | Mapping[str, Any]) -> RouteRecord:
    if isinstance(record, RouteRecord):
        return record
    fields = dict(record)
    if "name" not in fields:
        raise ConfigurationError("route record is missing 'name'")
    return RouteRecord.from_mapping(str(fields.pop("name")), fields)


def _to_route(record: RouteRecord, config: RouterConfig) -> Route:
    methods = normalize_methods(_check_methods(record.name, record.methods))
    if not methods:
        raise EmptyMethodList(record.name)

    route = Route(
        name=record.name,
        path=record.path,
        controller=record.controller,
        methods=methods,
        middleware=record.middleware or "",
        requirements=record.requirements,
        language=record.language or "",
    )

    declared = set(route.placeholders)
    stray = [key for key in route.requirements if key not in declared]
    if not stray:
        return route
    if config.strict_requirements:
        raise UndeclaredPlaceholderRequirement(record.name, stray[0])
    for placeholder in stray:
        logger.debug(
            "Route %r: dropping requirement for undeclared placeholder %r",
            record.name,
            placeholder,
        )
    # Rebuilt only when something was dropped
    kept = {k: v for k, v in route.requirements.items() if k in declared}
    return replace(route, requirements=kept)
