"""Routebook — named HTTP routes from YAML, matched and reversed.

Resolves a request path and method to a named route, and builds a URI from a
route name plus parameters, checking each value against its requirement.

Basic usage::

    from routebook import Router

    router = Router.from_path("config/routes.yaml")

    route = router.get_route("/user/101", "GET")
    route.controller                          # "user_controller::crud"

    router.get_uri("user", {"id": "101"})     # "/user/101"
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DuplicateRouteName",
    "EmptyMethodList",
    "InvalidPathTemplate",
    "InvalidRequirementPattern",
    "MissingParameter",
    "ParameterDoesNotMatchRequirement",
    "PathMatcher",
    "Route",
    "RouteFileError",
    "RouteMatch",
    "RouteNotFound",
    "RouteRecord",
    "RouteTable",
    "RoutebookError",
    "Router",
    "RouterConfig",
    "UndeclaredPlaceholderRequirement",
    "UriGenerationError",
]

_ERRORS = frozenset(
    {
        "ConfigurationError",
        "DuplicateRouteName",
        "EmptyMethodList",
        "InvalidPathTemplate",
        "InvalidRequirementPattern",
        "MissingParameter",
        "ParameterDoesNotMatchRequirement",
        "RouteFileError",
        "RouteNotFound",
        "RoutebookError",
        "UndeclaredPlaceholderRequirement",
        "UriGenerationError",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routebook`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from routebook.routing.router import Router

        return Router

    if name == "RouterConfig":
        from routebook.config import RouterConfig

        return RouterConfig

    if name in ("Route", "RouteMatch"):
        from routebook.routing import route as _route

        return getattr(_route, name)

    if name in ("RouteRecord", "RouteTable"):
        from routebook.routing import table as _table

        return getattr(_table, name)

    if name == "PathMatcher":
        from routebook.routing.matcher import PathMatcher

        return PathMatcher

    if name in _ERRORS:
        from routebook import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
