"""Registry import resolution — ``"module:attribute"`` strings to registries.

Shared by ``waymark routes`` and ``waymark url`` to locate a route
registry from a user-supplied import string.
"""

import importlib

from waymark.routing.registry import RouteRegistry, RouteTable


def resolve_registry(import_string: str) -> RouteRegistry:
    """Resolve an import string to a ``RouteRegistry``.

    Accepts ``"module:attribute"`` format. When the attribute portion
    is omitted, defaults to ``"routes"`` (e.g. ``"myapp.urls"`` resolves
    to ``myapp.urls.routes``).

    The attribute may be a ``RouteRegistry``, a ``RouteTable`` (frozen on
    load), or a zero-argument factory returning either.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a registry or route table.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, RouteTable | RouteRegistry):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, RouteTable):
        return obj.freeze()
    if isinstance(obj, RouteRegistry):
        return obj

    msg = f"{import_string!r} resolved to {type(obj).__name__}, not a RouteRegistry or RouteTable"
    raise TypeError(msg)
