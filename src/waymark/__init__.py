"""Waymark — declare each route once, build its URLs everywhere.

A route's path pattern is written exactly once. From that declaration
waymark derives a URL builder whose parameters are the pattern's
placeholders, and a ``(pattern, handler)`` binding for the router.

Basic usage::

    from waymark import RouteTable

    routes = RouteTable()
    user = routes.add("User", "/users/{id}", show_user)
    search = routes.add("Search", "/search", query=("q", "page"))

    registry = routes.freeze()
    user.url("user123")           # "/users/user123"
    search.url(q="go", page="")   # "/search?q=go"

Templates (kida)::

    from waymark.templating.integration import install_url_global
    install_url_global(env, registry)
    # {{ url_for('User', user.id) }}
"""

__version__ = "0.1.0"
__all__ = [
    "BuildError",
    "ConfigurationError",
    "DuplicateRouteName",
    "HandlerBinding",
    "MalformedTemplate",
    "MissingPathParameter",
    "PathTemplate",
    "RegistryConfig",
    "RouteDescriptor",
    "RouteRegistry",
    "RouteTable",
    "UnknownPathParameter",
    "UnknownRouteName",
    "WaymarkError",
    "bind_routes",
    "render",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waymark`` fast while providing a clean top-level API.
    """
    if name == "RegistryConfig":
        from waymark.config import RegistryConfig

        return RegistryConfig

    if name == "PathTemplate":
        from waymark.routing.template import PathTemplate

        return PathTemplate

    if name == "render":
        from waymark.routing.render import render

        return render

    if name == "RouteDescriptor":
        from waymark.routing.route import RouteDescriptor

        return RouteDescriptor

    if name in ("RouteRegistry", "RouteTable"):
        from waymark.routing import registry as _registry

        return getattr(_registry, name)

    if name in ("HandlerBinding", "bind_routes"):
        from waymark.routing import binder as _binder

        return getattr(_binder, name)

    if name in (
        "BuildError",
        "ConfigurationError",
        "DuplicateRouteName",
        "MalformedTemplate",
        "MissingPathParameter",
        "UnknownPathParameter",
        "UnknownRouteName",
        "WaymarkError",
    ):
        from waymark import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
