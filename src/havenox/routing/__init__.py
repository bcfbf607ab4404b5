"""Routing — ordered route table with first-match-wins dispatch.

Routes are registered during setup and compiled into an immutable
table when the app freezes.
"""

from havenox.routing.route import PathSegment, Route, RouteMatch
from havenox.routing.router import Router, compile_pattern, parse_path

__all__ = [
    "PathSegment",
    "Route",
    "RouteMatch",
    "Router",
    "compile_pattern",
    "parse_path",
]
