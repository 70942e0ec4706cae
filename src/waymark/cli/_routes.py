"""``waymark routes`` — list declared routes.

Resolves an import string to a registry and prints every route with
its name, methods, pattern, and handler.
"""

import argparse
import sys

from waymark.cli._resolve import resolve_registry
from waymark.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of NAME, METHOD, PATTERN, and HANDLER in registry order."""
    try:
        registry = resolve_registry(args.registry)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not registry:
        print("No routes declared.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for name, descriptor in registry.items():
        methods_str = ", ".join(sorted(descriptor.methods))
        if descriptor.handler is None:
            handler_name = "-"
        else:
            handler_name = getattr(descriptor.handler, "__qualname__", str(descriptor.handler))
        rows.append((name, methods_str, descriptor.pattern, handler_name))

    headers = ("NAME", "METHOD", "PATTERN", "HANDLER")
    widths = [max(len(headers[i]), *(len(r[i]) for r in rows)) for i in range(3)]
    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"

    print(fmt.format(*headers))
    sep_len = sum(widths) + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
