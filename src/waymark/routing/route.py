"""RouteDescriptor and its generated URL builder."""

import inspect
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from waymark.config import RegistryConfig
from waymark.errors import (
    ConfigurationError,
    MalformedTemplate,
    MissingPathParameter,
    UnknownPathParameter,
)
from waymark.routing.binder import HandlerBinding
from waymark.routing.render import render
from waymark.routing.template import PathTemplate

Handler: TypeAlias = Callable[..., Any]


class URLBuilder:
    """Callable that builds URLs for one route.

    The call signature is fixed when the route is declared: one parameter
    per placeholder, in template order, followed by keyword-only query
    parameters that default to ``None``::

        url = URLBuilder("Search", PathTemplate.parse("/search"), ("q", "page"))
        inspect.signature(url)   # (*, q=None, page=None)
        url(q="go")              # "/search?q=go"
    """

    __slots__ = ("__signature__", "_path_names", "_query_names", "name", "template")

    def __init__(
        self,
        name: str,
        template: PathTemplate,
        query_names: tuple[str, ...] = (),
    ) -> None:
        self.name = name
        self.template = template
        self._path_names = template.parameter_names
        self._query_names = query_names
        params = [
            inspect.Parameter(n, inspect.Parameter.POSITIONAL_OR_KEYWORD, annotation=str)
            for n in template.parameter_names
        ]
        params.extend(
            inspect.Parameter(n, inspect.Parameter.KEYWORD_ONLY, default=None, annotation=str | None)
            for n in query_names
        )
        self.__signature__ = inspect.Signature(params, return_annotation=str)

    def __call__(self, *args: object, **kwargs: object) -> str:
        path_names = self._path_names
        if len(args) > len(path_names):
            msg = (
                f"{self.name}() takes {len(path_names)} positional argument(s) "
                f"but {len(args)} were given"
            )
            raise TypeError(msg)

        path_params: dict[str, object] = dict(zip(path_names, args, strict=False))
        query: dict[str, object] = dict.fromkeys(self._query_names)
        unknown: list[str] = []
        for key, value in kwargs.items():
            if key in path_params:
                msg = f"{self.name}() got multiple values for argument {key!r}"
                raise TypeError(msg)
            if key in path_names:
                path_params[key] = value
            elif key in query:
                query[key] = value
            else:
                unknown.append(key)
        if unknown:
            raise UnknownPathParameter(self.template.pattern, tuple(unknown))

        missing = tuple(n for n in path_names if n not in path_params)
        if missing:
            raise MissingPathParameter(self.template.pattern, missing)

        return render(self.template, path_params, query)

    def __repr__(self) -> str:
        return f"<URLBuilder {self.name}{self.__signature__}>"


def _check_query_names(template: PathTemplate, query_names: tuple[str, ...]) -> None:
    seen: set[str] = set()
    for name in query_names:
        if not name.isidentifier():
            raise MalformedTemplate(
                template.pattern, f"query parameter {name!r} must be a valid Python identifier"
            )
        if name in template.parameter_names:
            raise MalformedTemplate(
                template.pattern, f"query parameter {name!r} shadows the placeholder {{{name}}}"
            )
        if name in seen:
            raise MalformedTemplate(template.pattern, f"query parameter {name!r} declared twice")
        seen.add(name)


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """A frozen route declaration.

    Holds the parsed template, the optional request handler, and the
    builder generated for this route. Created once at startup and never
    mutated::

        user = RouteDescriptor.create("User", "/users/{id}", show_user)
        user.url("user123")   # "/users/user123"
        user.binding()        # HandlerBinding("/users/{id}", show_user, ...)
    """

    name: str
    template: PathTemplate
    handler: Handler | None = None
    methods: frozenset[str] = frozenset({"GET"})
    query_names: tuple[str, ...] = ()
    url: URLBuilder = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_query_names(self.template, self.query_names)
        object.__setattr__(self, "url", URLBuilder(self.name, self.template, self.query_names))

    @classmethod
    def create(
        cls,
        name: str,
        pattern: str,
        handler: Handler | None = None,
        *,
        methods: Iterable[str] | None = None,
        query: Iterable[str] = (),
        config: RegistryConfig | None = None,
    ) -> "RouteDescriptor":
        """Parse *pattern* and build a descriptor for it.

        Args:
            name: Stable registry key, e.g. ``"User"``.
            pattern: Path pattern with ``{name}`` placeholders.
            handler: Request handler handed to the external router.
            methods: HTTP methods. Defaults to ``config.default_methods``.
            query: Names of optional query parameters, in render order.
            config: Declaration settings. Defaults to ``RegistryConfig()``.

        Raises:
            MalformedTemplate: If the pattern or a query name is invalid.
        """
        config = config or RegistryConfig()
        template = PathTemplate.parse(pattern, require_leading_slash=config.require_leading_slash)
        return cls(
            name=name,
            template=template,
            handler=handler,
            methods=frozenset(m.upper() for m in (methods or config.default_methods)),
            query_names=tuple(query),
        )

    @property
    def pattern(self) -> str:
        """The raw pattern, placeholders intact."""
        return self.template.pattern

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return self.template.parameter_names

    def binding(self) -> HandlerBinding:
        """Pair the raw pattern with the handler for an external router.

        Raises ``ConfigurationError`` if the route was declared without a
        handler.
        """
        if self.handler is None:
            msg = f"Route {self.name!r} ({self.pattern}) has no handler to bind."
            raise ConfigurationError(msg)
        return HandlerBinding(
            pattern=self.pattern,
            handler=self.handler,
            name=self.name,
            methods=self.methods,
        )
