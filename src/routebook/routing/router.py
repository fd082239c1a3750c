"""Compiled router with declaration-order path matching.

The route table and one compiled matcher per route are built eagerly when
the router is constructed; nothing changes afterwards, so a router can be
shared freely between threads. To reload routes, build a new router and
swap the reference.
"""

import logging
from collections.abc import Iterable, Mapping
from os import PathLike
from typing import Any

from routebook.config import RouterConfig
from routebook.errors import RouteNotFound
from routebook.routing.matcher import PathMatcher
from routebook.routing.route import Route, RouteMatch
from routebook.routing.table import RouteRecord, RouteTable

logger = logging.getLogger("routebook.router")


class Router:
    """Routing table compiled into matchers.

    Usage::

        router = Router([
            RouteRecord(name="home", path="/", controller="home::index", methods="get"),
            RouteRecord(
                name="user",
                path="/user/{id}",
                controller="user::crud",
                methods="get, post",
                requirements={"id": "^[0-9]+"},
            ),
        ])
        router.get_route("/user/101", "GET")   # Route(name="user", ...)
        router.get_uri("user", {"id": "101"})  # "/user/101"

    Precedence is declaration order: when two templates can match the same
    path, the route declared first wins.
    """

    __slots__ = ("_entries", "_matchers", "_table")

    def __init__(
        self,
        routes: RouteTable | Iterable[RouteRecord | Mapping[str, Any]] = (),
        config: RouterConfig | None = None,
    ) -> None:
        config = config or RouterConfig()
        if isinstance(routes, RouteTable):
            self._table = routes
        else:
            self._table = RouteTable.build(routes, config)
        # Matchers are compiled in table order; any invalid requirement aborts construction
        self._entries: tuple[tuple[Route, PathMatcher], ...] = tuple(
            (route, PathMatcher(route, config)) for route in self._table.iter_in_order()
        )
        self._matchers: dict[str, PathMatcher] = {route.name: m for route, m in self._entries}
        logger.debug("Compiled %d route matcher(s)", len(self._entries))

    @classmethod
    def from_path(
        cls, source: str | PathLike[str], config: RouterConfig | None = None
    ) -> "Router":
        """Build a router from a YAML route file or a directory of them."""
        from routebook.loader import load_records

        config = config or RouterConfig()
        return cls(load_records(source, config), config)

    @property
    def table(self) -> RouteTable:
        return self._table

    @property
    def routes(self) -> tuple[Route, ...]:
        """All routes, in declaration order."""
        return self._table.routes

    def matcher_for(self, name: str) -> PathMatcher | None:
        """Return the compiled matcher of the route called *name*."""
        return self._matchers.get(name)

    def match(self, path: str, method: str) -> RouteMatch | None:
        """Match a request path and method against the compiled routes.

        Returns a ``RouteMatch`` with the extracted placeholder values, or
        ``None`` when no route accepts both the path and the method.
        """
        method = method.lower()
        logger.debug("Finding a route for %s %r", method, path)
        for route, matcher in self._entries:
            if method not in route.methods:
                continue
            params = matcher.match(path)
            if params is not None:
                logger.debug("Route %r matches %r", route.name, path)
                return RouteMatch(route=route, path_params=params)
        return None

    def get_route(self, path: str, method: str) -> Route | None:
        """Return the first route accepting *path* and *method*, else ``None``.

        A path that exists under other methods also yields ``None``; use
        ``allowed_methods`` to tell the two cases apart.
        """
        found = self.match(path, method)
        return found.route if found is not None else None

    def allowed_methods(self, path: str) -> frozenset[str]:
        """Union of the methods of every route whose template matches *path*.

        Empty when no template matches.
        """
        allowed: set[str] = set()
        for route, matcher in self._entries:
            if matcher.match(path) is not None:
                allowed |= route.methods
        return frozenset(allowed)

    def get_uri(self, name: str, parameters: Mapping[str, object] | None = None) -> str:
        """Build the URI for the route called *name*.

        Raises ``RouteNotFound`` for an unknown name, ``MissingParameter``
        for an unbound placeholder, and ``ParameterDoesNotMatchRequirement``
        when a value fails its requirement. Extra parameters are ignored.
        """
        matcher = self.matcher_for(name)
        if matcher is None:
            raise RouteNotFound(name)
        return matcher.reverse(parameters or {})

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"<Router {len(self)} route(s)>"
