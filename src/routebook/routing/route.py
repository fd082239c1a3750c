"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from routebook.routing.template import PathSegment, parse_template, placeholder_names


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Built by ``RouteTable.build`` from a normalized record. The template is
    parsed on construction, so an invalid path fails here rather than at
    match time. ``controller`` and ``middleware`` are opaque to the router.
    """

    name: str
    path: str
    controller: str
    methods: frozenset[str]
    middleware: str = ""
    requirements: Mapping[str, str] = field(default_factory=dict)
    language: str = ""
    segments: tuple[PathSegment, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "methods", frozenset(self.methods))
        object.__setattr__(self, "requirements", MappingProxyType(dict(self.requirements)))
        object.__setattr__(self, "segments", parse_template(self.path, self.name))

    def __hash__(self) -> int:
        return hash((self.name, self.path))

    @property
    def placeholders(self) -> tuple[str, ...]:
        """Placeholder identifiers in the order they appear in ``path``."""
        return placeholder_names(self.segments)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]

    @property
    def language(self) -> str:
        """Locale captured by the route's language placeholder, or ``""``."""
        if not self.route.language:
            return ""
        return self.path_params.get(self.route.language, "")
