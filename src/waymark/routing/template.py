"""Path templates: parsed once, rendered many times.

A pattern is literal text with ``{name}`` placeholders::

    "/users/{id}"            -> "/users/", {id}
    "/orgs/{org}/repos/{repo}" -> "/orgs/", {org}, "/repos/", {repo}
"""

import keyword
import re
from dataclasses import dataclass, field

from waymark.errors import MalformedTemplate

# Flask/Django style placeholders, caught early with a pointer to {name}
_ANGLE_PARAM = re.compile(r"<[^<>/]+>")


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed piece of a path pattern.

    Literal:  ``/users/``  (is_param=False)
    Param:    ``{id}``     (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


def _check_name(pattern: str, name: str) -> None:
    if not name:
        raise MalformedTemplate(pattern, "empty placeholder '{}'")
    if "{" in name:
        raise MalformedTemplate(pattern, f"nested '{{' inside placeholder {name!r}")
    if not name.isidentifier() or keyword.iskeyword(name):
        raise MalformedTemplate(
            pattern,
            f"placeholder {{{name}}} must be a valid Python identifier "
            "(converters such as {id:int} are not supported)",
        )


def parse_template(pattern: str) -> list[PathSegment]:
    """Split a pattern into literal and placeholder segments.

    Examples::

        "/search"       -> [PathSegment("/search")]
        "/users/{id}"   -> [PathSegment("/users/"), PathSegment("{id}", True, "id")]
        "/a/{x}-{y}"    -> [PathSegment("/a/"), {x}, PathSegment("-"), {y}]

    Raises ``MalformedTemplate`` for unbalanced or nested braces, empty or
    non-identifier names, repeated names, ``<name>`` placeholders, and
    patterns carrying a query string or fragment.
    """
    if _ANGLE_PARAM.search(pattern):
        raise MalformedTemplate(
            pattern,
            "uses <param> syntax; waymark expects {param} placeholders",
        )
    if "?" in pattern or "#" in pattern:
        raise MalformedTemplate(
            pattern,
            "query strings and fragments don't belong in the pattern; "
            "declare query parameters on the route instead",
        )

    segments: list[PathSegment] = []
    seen: set[str] = set()
    pos = 0
    while pos < len(pattern):
        open_at = pattern.find("{", pos)
        close_at = pattern.find("}", pos)

        if close_at != -1 and (open_at == -1 or close_at < open_at):
            raise MalformedTemplate(pattern, f"unmatched '}}' at offset {close_at}")

        if open_at == -1:
            segments.append(PathSegment(value=pattern[pos:]))
            break

        if open_at > pos:
            segments.append(PathSegment(value=pattern[pos:open_at]))

        if close_at == -1:
            raise MalformedTemplate(pattern, f"unmatched '{{' at offset {open_at}")

        name = pattern[open_at + 1 : close_at]
        _check_name(pattern, name)
        if name in seen:
            raise MalformedTemplate(pattern, f"placeholder {{{name}}} appears more than once")
        seen.add(name)

        segments.append(PathSegment(value=f"{{{name}}}", is_param=True, param_name=name))
        pos = close_at + 1

    return segments


@dataclass(frozen=True, slots=True)
class PathTemplate:
    """An immutable, pre-parsed path pattern.

    Build with :meth:`parse`; the segments are computed once and reused
    for every render::

        tpl = PathTemplate.parse("/users/{id}")
        tpl.parameter_names  # ("id",)
    """

    pattern: str
    segments: tuple[PathSegment, ...] = field(repr=False)
    parameter_names: tuple[str, ...]

    @classmethod
    def parse(cls, pattern: str, *, require_leading_slash: bool = True) -> "PathTemplate":
        """Parse *pattern* into a template.

        Raises ``MalformedTemplate`` if the pattern is invalid, or if it
        doesn't start with ``/`` while *require_leading_slash* is set.
        """
        if require_leading_slash and not pattern.startswith("/"):
            raise MalformedTemplate(pattern, "must start with '/'")
        segments = tuple(parse_template(pattern))
        names = tuple(s.param_name for s in segments if s.param_name is not None)
        return cls(pattern=pattern, segments=segments, parameter_names=names)

    @property
    def is_static(self) -> bool:
        """True when the pattern has no placeholders."""
        return not self.parameter_names

    def __str__(self) -> str:
        return self.pattern
