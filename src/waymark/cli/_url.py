"""``waymark url`` — build a URL for a named route.

Positional ``ARG`` values fill placeholders in template order;
``name=value`` arguments fill them by name. ``--query key=value``
fills declared query parameters.
"""

import argparse
import sys

from waymark.cli._resolve import resolve_registry
from waymark.errors import ConfigurationError, UnknownRouteName


def _split_pairs(items: list[str], what: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            msg = f"Expected {what} as key=value, got {item!r}"
            raise ValueError(msg)
        pairs[key] = value
    return pairs


def run_url(args: argparse.Namespace) -> None:
    """Resolve the registry, build the URL, and print it to stdout."""
    try:
        registry = resolve_registry(args.registry)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    positional = [a for a in args.args if "=" not in a]
    try:
        keywords = _split_pairs([a for a in args.args if "=" in a], "path parameter")
        keywords.update(_split_pairs(args.query, "query parameter"))
        url = registry.url_for(args.name, *positional, **keywords)
    except (UnknownRouteName, TypeError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(url)
