"""Substitution engine: template + bindings -> URL string.

Pure functions, no shared state. Safe to call from any thread.
"""

from collections.abc import Iterable, Mapping
from typing import TypeAlias

from waymark.errors import MissingPathParameter, UnknownPathParameter
from waymark.routing.template import PathTemplate

QueryBinding: TypeAlias = Mapping[str, object] | Iterable[tuple[str, object]]


def _query_items(query: QueryBinding) -> Iterable[tuple[str, object]]:
    if isinstance(query, Mapping):
        return query.items()
    return query


def render_query(query: QueryBinding | None) -> str:
    """Render a query binding as ``key=value`` pairs joined by ``&``.

    Entries whose value is ``None`` or ``""`` are skipped. Order follows
    the binding's iteration order. Values are emitted as given, without
    URL escaping. Returns ``""`` when nothing is retained.
    """
    if not query:
        return ""
    parts = [
        f"{key}={value}"
        for key, value in _query_items(query)
        if value is not None and value != ""
    ]
    return "&".join(parts)


def render(
    template: PathTemplate,
    path_params: Mapping[str, object],
    query_params: QueryBinding | None = None,
) -> str:
    """Substitute *path_params* into *template* and append *query_params*.

    Examples::

        render(PathTemplate.parse("/users/{id}"), {"id": "user123"})
        # "/users/user123"

        render(PathTemplate.parse("/search"), {}, {"q": "go", "page": ""})
        # "/search?q=go"

    Raises ``MissingPathParameter`` if a placeholder has no value and
    ``UnknownPathParameter`` if *path_params* names something the
    template doesn't declare.
    """
    unknown = tuple(name for name in path_params if name not in template.parameter_names)
    if unknown:
        raise UnknownPathParameter(template.pattern, unknown)
    missing = tuple(name for name in template.parameter_names if name not in path_params)
    if missing:
        raise MissingPathParameter(template.pattern, missing)

    path = "".join(
        str(path_params[seg.param_name]) if seg.param_name is not None else seg.value
        for seg in template.segments
    )

    query = render_query(query_params)
    if query:
        return f"{path}?{query}"
    return path
