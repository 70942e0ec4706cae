"""Waymark exception hierarchy.

Shared across templates, descriptors, the registry, and the CLI so every
module raises and catches the same types.

Declaration errors (``ConfigurationError`` and subclasses) are fatal at
startup. Build errors subclass ``TypeError`` because they are the same
mistake as calling a function with the wrong arguments.
"""


class WaymarkError(Exception):
    """Base for all waymark-specific errors."""


class ConfigurationError(WaymarkError):
    """Raised when a route declaration is invalid.

    Typically surfaces while the route table is being declared or frozen.
    """


class MalformedTemplate(ConfigurationError):  # noqa: N818
    """A path pattern has bad placeholder syntax or a repeated name."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Malformed path template {pattern!r}: {reason}")


class DuplicateRouteName(ConfigurationError):  # noqa: N818
    """Two route descriptors claim the same name."""

    def __init__(self, name: str, existing: str, duplicate: str) -> None:
        self.name = name
        self.existing = existing
        self.duplicate = duplicate
        super().__init__(
            f"Route name {name!r} is already declared for {existing!r}; "
            f"cannot declare it again for {duplicate!r}."
        )


class BuildError(WaymarkError, TypeError):
    """A URL was built with arguments that don't match its template."""


class MissingPathParameter(BuildError):  # noqa: N818
    """A placeholder in the template received no value."""

    def __init__(self, pattern: str, names: tuple[str, ...]) -> None:
        self.pattern = pattern
        self.names = names
        listed = ", ".join(repr(n) for n in names)
        super().__init__(f"Missing path parameter(s) {listed} for {pattern!r}")


class UnknownPathParameter(BuildError):  # noqa: N818
    """A value was supplied for a name the template doesn't declare."""

    def __init__(self, pattern: str, names: tuple[str, ...]) -> None:
        self.pattern = pattern
        self.names = names
        listed = ", ".join(repr(n) for n in names)
        super().__init__(f"Unknown path parameter(s) {listed} for {pattern!r}")


class UnknownRouteName(WaymarkError, KeyError):  # noqa: N818
    """Registry lookup for a name that was never declared.

    Includes close matches in the message when there are any.
    """

    def __init__(self, name: str, suggestions: tuple[str, ...] = ()) -> None:
        self.name = name
        self.suggestions = suggestions
        super().__init__(name)

    def __str__(self) -> str:
        msg = f"No route named {self.name!r}"
        if self.suggestions:
            msg += f". Did you mean: {', '.join(self.suggestions)}?"
        return msg
