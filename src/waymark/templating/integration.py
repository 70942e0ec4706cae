"""Kida environment binding.

Exposes a frozen ``RouteRegistry`` to templates as a global so markup
builds links from route names instead of repeating path strings::

    <a href="{{ url_for('User', user.id) }}">{{ user.name }}</a>
    <form hx-get="{{ url_for('Search', q=query) }}">
"""

from collections.abc import Callable

from kida import Environment

from waymark.config import RegistryConfig
from waymark.routing.registry import RouteRegistry


def url_global(registry: RouteRegistry) -> Callable[..., str]:
    """Return the ``url_for(name, *args, **kwargs)`` callable for templates."""

    def url_for(name: str, /, *args: object, **kwargs: object) -> str:
        return registry.url_for(name, *args, **kwargs)

    return url_for


def install_url_global(
    env: Environment,
    registry: RouteRegistry,
    config: RegistryConfig | None = None,
) -> Environment:
    """Register the registry's URL builder as a global on *env*.

    The global is named ``config.template_global`` (``url_for`` by
    default). Call once, after the route table is frozen. Returns *env*.
    """
    config = config or RegistryConfig()
    env.add_global(config.template_global, url_global(registry))
    return env
