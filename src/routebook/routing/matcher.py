"""Compiled path matcher — one per route.

Every placeholder pattern (its requirement, or the default) is compiled once,
on its own, at router construction. Matching walks the template: literal
runs must appear verbatim, and each placeholder tries the candidate values
the following literal allows, keeping the first whose whole text satisfies
the placeholder's pattern. Requirements are never rewritten or spliced into
a larger expression, so ``^``, ``$`` and inline flags keep their meaning.
"""

import re
from collections.abc import Iterable, Mapping

from routebook.config import RouterConfig
from routebook.errors import (
    InvalidRequirementPattern,
    MissingParameter,
    ParameterDoesNotMatchRequirement,
)
from routebook.routing.route import Route


class PathMatcher:
    """Compiled form of a single route's path template.

    Usage::

        matcher = PathMatcher(route)
        matcher.match("/user/101")        # {"id": "101"}
        matcher.match("/user/abc")        # None when id requires digits
        matcher.reverse({"id": "101"})    # "/user/101"
    """

    __slots__ = ("_patterns", "_requirements", "route")

    def __init__(self, route: Route, config: RouterConfig | None = None) -> None:
        config = config or RouterConfig()
        self.route = route
        # Placeholder identifier -> pattern used while matching
        self._patterns: dict[str, re.Pattern[str]] = {}
        # Only the placeholders with a declared requirement; checked by reverse()
        self._requirements: dict[str, re.Pattern[str]] = {}

        for name in route.placeholders:
            declared = route.requirements.get(name)
            if declared is None:
                self._patterns[name] = _compile(route, name, config.default_requirement)
            else:
                self._patterns[name] = self._requirements[name] = _compile(route, name, declared)

    def match(self, candidate: str) -> dict[str, str] | None:
        """Return placeholder values when *candidate* matches the whole template."""
        params: dict[str, str] = {}
        if self._match_from(candidate, 0, 0, params):
            return params
        return None

    def _match_from(self, candidate: str, index: int, pos: int, params: dict[str, str]) -> bool:
        """Match segments ``index..`` against ``candidate[pos:]``, filling *params*."""
        segments = self.route.segments
        if index == len(segments):
            return pos == len(candidate)

        seg = segments[index]
        if not seg.is_param:
            if not candidate.startswith(seg.value, pos):
                return False
            return self._match_from(candidate, index + 1, pos + len(seg.value), params)

        pattern = self._patterns[seg.value]
        for end in self._value_ends(candidate, index, pos):
            value = candidate[pos:end]
            if pattern.fullmatch(value) is None:
                continue
            params[seg.value] = value
            if self._match_from(candidate, index + 1, end, params):
                return True
        params.pop(seg.value, None)
        return False

    def _value_ends(self, candidate: str, index: int, pos: int) -> Iterable[int]:
        """End offsets worth trying for the placeholder at *index*, longest first."""
        segments = self.route.segments
        if index + 1 == len(segments):
            return (len(candidate),)

        ends = range(len(candidate), pos - 1, -1)
        following = segments[index + 1]
        if following.is_param:
            return ends
        return [end for end in ends if candidate.startswith(following.value, end)]

    def reverse(self, parameters: Mapping[str, object]) -> str:
        """Substitute *parameters* into the template.

        Raises ``MissingParameter`` for an unbound placeholder and
        ``ParameterDoesNotMatchRequirement`` when a value fails its
        requirement. Unreferenced parameters are ignored.
        """
        out: list[str] = []
        for seg in self.route.segments:
            if not seg.is_param:
                out.append(seg.value)
                continue

            if seg.value not in parameters:
                raise MissingParameter(seg.value)
            value = str(parameters[seg.value])

            requirement = self._requirements.get(seg.value)
            if requirement is not None and requirement.fullmatch(value) is None:
                raise ParameterDoesNotMatchRequirement(
                    seg.value, value, self.route.requirements[seg.value]
                )
            out.append(value)
        return "".join(out)


def _compile(route: Route, placeholder: str, pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidRequirementPattern(route.name, placeholder, pattern, str(exc)) from exc
