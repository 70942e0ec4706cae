"""Registry configuration.

RegistryConfig is a frozen dataclass — immutable after creation, passed
explicitly to whatever needs it, no module-level settings.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Route declaration settings. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RegistryConfig(require_leading_slash=False)
    """

    # Templates
    require_leading_slash: bool = True

    # Handler binding
    default_methods: tuple[str, ...] = ("GET",)

    # Name of the URL builder global installed into kida environments
    template_global: str = "url_for"
