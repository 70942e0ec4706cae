"""Routing — path templates, URL builders, and the frozen route registry.

Routes are declared during setup and frozen into an immutable registry
that builds URLs and hands ``(pattern, handler)`` pairs to the router.
"""

from waymark.routing.binder import HandlerBinding, bind_routes
from waymark.routing.registry import RouteRegistry, RouteTable, build_registry
from waymark.routing.render import render, render_query
from waymark.routing.route import RouteDescriptor, URLBuilder
from waymark.routing.template import PathSegment, PathTemplate, parse_template

__all__ = [
    "HandlerBinding",
    "PathSegment",
    "PathTemplate",
    "RouteDescriptor",
    "RouteRegistry",
    "RouteTable",
    "URLBuilder",
    "bind_routes",
    "build_registry",
    "parse_template",
    "render",
    "render_query",
]
