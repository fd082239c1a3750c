"""Path template parsing.

A template is literal text with ``{identifier}`` placeholders::

    "/"                    -> [PathSegment("/")]
    "/user/{id}"           -> [PathSegment("/user/"), PathSegment("id", is_param=True)]
    "/f/{name}.{ext}"      -> [PathSegment("/f/"), PathSegment("name", is_param=True),
                               PathSegment("."), PathSegment("ext", is_param=True)]

Braces always delimit placeholders; there is no escape for a literal brace.
"""

import re
from dataclasses import dataclass

from routebook.errors import InvalidPathTemplate

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed run of a path template.

    Literal:      ``/user/``  (is_param=False, value is the text)
    Placeholder:  ``{id}``    (is_param=True, value is the identifier)
    """

    value: str
    is_param: bool = False


def parse_template(path: str, route: str = "") -> tuple[PathSegment, ...]:
    """Split *path* into alternating literal runs and placeholders.

    Raises ``InvalidPathTemplate`` for unbalanced braces, malformed
    identifiers, or an identifier used twice. *route* only labels the error.
    """
    segments: list[PathSegment] = []
    seen: set[str] = set()

    rest = path
    while rest:
        literal, brace, rest = rest.partition("{")
        if "}" in literal:
            raise InvalidPathTemplate(route, path, 'unbalanced "}"')
        if literal:
            segments.append(PathSegment(literal))
        if not brace:
            break

        name, closing, rest = rest.partition("}")
        if not closing:
            raise InvalidPathTemplate(route, path, 'unbalanced "{"')
        if not _IDENTIFIER.fullmatch(name):
            raise InvalidPathTemplate(route, path, f"invalid placeholder name {name!r}")
        if name in seen:
            raise InvalidPathTemplate(route, path, f"duplicate placeholder {name!r}")
        seen.add(name)
        segments.append(PathSegment(name, is_param=True))

    return tuple(segments)


def placeholder_names(segments: tuple[PathSegment, ...]) -> tuple[str, ...]:
    """Placeholder identifiers in declaration order."""
    return tuple(seg.value for seg in segments if seg.is_param)
