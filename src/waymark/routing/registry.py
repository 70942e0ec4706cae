"""Route table and the frozen registry it compiles into.

Routes are declared on a ``RouteTable`` during setup and frozen into an
immutable ``RouteRegistry`` before the first request. The registry is
read-only afterwards, so any number of threads can read it without
locking.
"""

import difflib
import logging
import threading
from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType

from waymark.config import RegistryConfig
from waymark.errors import DuplicateRouteName, UnknownRouteName
from waymark.routing.binder import HandlerBinding
from waymark.routing.route import Handler, RouteDescriptor

logger = logging.getLogger("waymark.registry")


class RouteRegistry(Mapping[str, RouteDescriptor]):
    """Immutable, insertion-ordered mapping of route name to descriptor.

    Usage::

        registry = RouteRegistry([user, post])
        registry["User"].url("user123")        # "/users/user123"
        registry.url_for("Post", slug="hello")  # "/posts/hello"
    """

    __slots__ = ("_routes",)

    def __init__(self, descriptors: Iterable[RouteDescriptor] = ()) -> None:
        routes: dict[str, RouteDescriptor] = {}
        by_pattern: dict[str, str] = {}
        for descriptor in descriptors:
            existing = routes.get(descriptor.name)
            if existing is not None:
                raise DuplicateRouteName(descriptor.name, existing.pattern, descriptor.pattern)
            routes[descriptor.name] = descriptor

            other = by_pattern.setdefault(descriptor.pattern, descriptor.name)
            if other != descriptor.name:
                logger.warning(
                    "Routes %r and %r share the pattern %r",
                    other,
                    descriptor.name,
                    descriptor.pattern,
                )
        self._routes: Mapping[str, RouteDescriptor] = MappingProxyType(routes)

    def __getitem__(self, name: str) -> RouteDescriptor:
        try:
            return self._routes[name]
        except KeyError:
            suggestions = tuple(difflib.get_close_matches(name, self._routes, n=3))
            raise UnknownRouteName(name, suggestions) from None

    def __contains__(self, name: object) -> bool:
        return name in self._routes

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteRegistry({list(self._routes)!r})"

    def url_for(self, name: str, /, *args: object, **kwargs: object) -> str:
        """Look up *name* and build its URL with the given arguments."""
        return self[name].url(*args, **kwargs)

    def bindings(self) -> list[HandlerBinding]:
        """Return ``(pattern, handler)`` bindings in registry order.

        Routes without a handler are skipped.
        """
        return [d.binding() for d in self._routes.values() if d.handler is not None]


class RouteTable:
    """Collects route declarations and freezes them into a registry.

    Usage::

        routes = RouteTable()
        user = routes.add("User", "/users/{id}")

        @routes.route("Post", "/posts/{slug}")
        def show_post(request, slug):
            ...

        registry = routes.freeze()
    """

    __slots__ = ("_descriptors", "_freeze_lock", "_registry", "config")

    def __init__(self, config: RegistryConfig | None = None) -> None:
        self.config = config or RegistryConfig()
        self._descriptors: dict[str, RouteDescriptor] = {}
        self._registry: RouteRegistry | None = None
        self._freeze_lock = threading.Lock()

    def add(
        self,
        name: str,
        pattern: str,
        handler: Handler | None = None,
        *,
        methods: Iterable[str] | None = None,
        query: Iterable[str] = (),
    ) -> RouteDescriptor:
        """Declare a route and return its descriptor.

        Raises ``MalformedTemplate`` for a bad pattern and
        ``DuplicateRouteName`` if *name* is already declared.
        """
        self._check_not_frozen()
        descriptor = RouteDescriptor.create(
            name, pattern, handler, methods=methods, query=query, config=self.config
        )
        existing = self._descriptors.get(name)
        if existing is not None:
            raise DuplicateRouteName(name, existing.pattern, pattern)
        self._descriptors[name] = descriptor
        return descriptor

    def route(
        self,
        name: str,
        pattern: str,
        *,
        methods: Iterable[str] | None = None,
        query: Iterable[str] = (),
    ) -> Callable[[Handler], Handler]:
        """Declare a route whose handler is the decorated function.

        The function is returned unchanged.
        """

        def decorator(func: Handler) -> Handler:
            self.add(name, pattern, func, methods=methods, query=query)
            return func

        return decorator

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    @property
    def frozen(self) -> bool:
        return self._registry is not None

    def freeze(self) -> RouteRegistry:
        """Compile the declarations into a ``RouteRegistry``.

        Idempotent and thread-safe: the first caller builds the registry,
        later callers get the same instance.
        """
        registry = self._registry
        if registry is not None:
            return registry
        with self._freeze_lock:
            if self._registry is None:
                self._registry = RouteRegistry(self._descriptors.values())
                logger.debug("Froze route table with %d route(s)", len(self._registry))
            return self._registry

    def _check_not_frozen(self) -> None:
        if self._registry is not None:
            msg = (
                "Cannot declare routes after the route table has been frozen. "
                "Declare every route before calling freeze()."
            )
            raise RuntimeError(msg)


def build_registry(*descriptors: RouteDescriptor) -> RouteRegistry:
    """Collect *descriptors* into a registry. Shorthand for ``RouteRegistry``."""
    return RouteRegistry(descriptors)
