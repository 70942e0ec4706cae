"""Handler binding: hand ``(pattern, handler)`` pairs to an external router.

The router is whatever the application runs (Starlette, Flask, a hand
rolled dispatcher). Waymark never matches requests itself; it only
registers each declared pattern with its handler, once, in order.

Usage::

    from waymark.routing.binder import bind_routes

    bind_routes(registry, lambda pattern, handler: app.route(pattern)(handler))
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from waymark.routing.registry import RouteRegistry

logger = logging.getLogger("waymark.binder")


@dataclass(frozen=True, slots=True)
class HandlerBinding:
    """A raw pattern paired with its handler.

    Unpacks like a two-tuple so routers that expect ``(pattern, handler)``
    can consume it directly::

        pattern, handler = descriptor.binding()
    """

    pattern: str
    handler: Callable[..., Any]
    name: str
    methods: frozenset[str] = frozenset({"GET"})

    def __iter__(self) -> Iterator[Any]:
        yield self.pattern
        yield self.handler


def bind_routes(
    registry: "RouteRegistry",
    register: Callable[[str, Callable[..., Any]], object],
) -> int:
    """Call ``register(pattern, handler)`` for every route with a handler.

    Routes are bound in registry order. Routes declared without a handler
    (link-only routes) are skipped. Returns the number of routes bound.
    """
    count = 0
    for binding in registry.bindings():
        register(binding.pattern, binding.handler)
        logger.debug(
            "Bound %s %s -> %s",
            ",".join(sorted(binding.methods)),
            binding.pattern,
            getattr(binding.handler, "__qualname__", binding.handler),
        )
        count += 1
    return count
