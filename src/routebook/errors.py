"""Routebook exception hierarchy.

Shared across the route table, matcher, router and loader so every module
raises and catches the same types.

Two families:

- ``ConfigurationError``: raised while building a table or router.
  Fatal: the caller never receives a partially built router.
- ``UriGenerationError``: raised by ``Router.get_uri`` at call time.

``Router.get_route`` never raises; a missing match is ``None``.
"""


class RoutebookError(Exception):
    """Base for all routebook-specific errors."""


class ConfigurationError(RoutebookError):
    """Raised when route definitions are invalid.

    Typically surfaced while constructing a ``Router``.
    """


class DuplicateRouteName(ConfigurationError):  # noqa: N818
    """Two route records share the same name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate route name {name!r}.")


class UndeclaredPlaceholderRequirement(ConfigurationError):  # noqa: N818
    """A requirement targets a placeholder the path does not declare."""

    def __init__(self, route: str, placeholder: str) -> None:
        self.route = route
        self.placeholder = placeholder
        super().__init__(
            f"Route {route!r} has a requirement for {placeholder!r}, "
            f"but its path declares no {{{placeholder}}} placeholder."
        )


class EmptyMethodList(ConfigurationError):  # noqa: N818
    """The methods field normalizes to nothing."""

    def __init__(self, route: str) -> None:
        self.route = route
        super().__init__(f"Route {route!r} declares no HTTP methods.")


class InvalidRequirementPattern(ConfigurationError):  # noqa: N818
    """A requirement string is not a valid regular expression."""

    def __init__(self, route: str, placeholder: str, pattern: str, reason: str = "") -> None:
        self.route = route
        self.placeholder = placeholder
        self.pattern = pattern
        msg = f"Route {route!r}: requirement for {placeholder!r} is not a valid regex: {pattern!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class InvalidPathTemplate(ConfigurationError):
    """A path template has unbalanced braces or a malformed placeholder."""

    def __init__(self, route: str, path: str, reason: str) -> None:
        self.route = route
        self.path = path
        self.reason = reason
        super().__init__(f"Route {route!r}: invalid path template {path!r}: {reason}")


class RouteFileError(ConfigurationError):
    """A route file is missing, unreadable, or not shaped like a route list."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class UriGenerationError(RoutebookError):
    """Base for failures raised by ``Router.get_uri``."""


class RouteNotFound(UriGenerationError):  # noqa: N818
    """No route is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Route {name!r} not found.")


class MissingParameter(UriGenerationError):  # noqa: N818
    """A placeholder has no bound value."""

    def __init__(self, placeholder: str) -> None:
        self.placeholder = placeholder
        super().__init__(f"Missing value for placeholder {placeholder!r}.")


class ParameterDoesNotMatchRequirement(UriGenerationError):  # noqa: N818
    """A supplied value fails the placeholder's requirement pattern.

    ``pattern`` is the requirement exactly as it was declared.
    """

    def __init__(self, placeholder: str, value: str, pattern: str) -> None:
        self.placeholder = placeholder
        self.value = value
        self.pattern = pattern
        super().__init__(
            f"Value {value!r} for placeholder {placeholder!r} "
            f"does not match requirement {pattern!r}."
        )
