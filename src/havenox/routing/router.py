"""Compiled router with ordered, first-match-wins path matching.

Patterns use ``:name`` segments for parameters::

    "/"                  -> ()
    "/listings"          -> (PathSegment("listings"),)
    "/listings/:id"      -> (PathSegment("listings"), PathSegment(":id", is_param=True, ...))

Routes are tried in registration order and the first route whose method
and segments match wins. Overlapping patterns are not reordered: with
``/items/:id`` registered before ``/items/new``, a request for
``/items/new`` goes to the ``:id`` handler with ``id="new"``. Register
literal routes first when both exist.
"""

from dataclasses import replace
from urllib.parse import unquote

from havenox._internal.types import Handler
from havenox.errors import ConfigurationError, NotFound
from havenox.http.request import normalize_path
from havenox.routing.route import PathSegment, Route, RouteMatch


def parse_path(pattern: str) -> tuple[PathSegment, ...]:
    """Compile a route pattern into segments.

    The pattern is normalized first (trailing slashes stripped, empty
    becomes ``/``). Empty segments from doubled slashes are dropped.

    Raises ``ConfigurationError`` for a bare ``:`` segment.
    """
    segments: list[PathSegment] = []
    for part in normalize_path(pattern).split("/"):
        if not part:
            continue
        if part.startswith(":"):
            name = part[1:]
            if not name:
                msg = f"Route pattern {pattern!r} has a parameter segment without a name."
                raise ConfigurationError(msg)
            segments.append(PathSegment(value=part, is_param=True, param_name=name))
        else:
            segments.append(PathSegment(value=part))
    return tuple(segments)


def compile_pattern(method: str, pattern: str, handler: Handler, name: str | None = None) -> Route:
    """Build a compiled Route from a method, pattern, and handler."""
    normalized = normalize_path(pattern)
    return Route(
        method=method.upper(),
        pattern=normalized,
        handler=handler,
        segments=parse_path(normalized),
        name=name,
    )


def _split_request_path(path: str) -> list[str] | None:
    """Split a normalized request path into raw segments.

    Empty segments are kept so ``/a//b`` does not match ``/a/b``.
    Returns None for paths that do not start with ``/``.
    """
    if not path.startswith("/"):
        return None
    if path == "/":
        return []
    return path[1:].split("/")


class Router:
    """Ordered route table.

    Usage::

        router = Router()
        router.add(compile_pattern("GET", "/listings/:id", get_listing))
        router.compile()
        match = router.match("GET", "/listings/abc")
        match.path_params  # {"id": "abc"}
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] | tuple[Route, ...] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Append a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        if not route.segments and route.pattern != "/":
            route = replace(route, segments=parse_path(route.pattern))
        self._routes.append(route)  # type: ignore[union-attr]

    def register_route(self, method: str, pattern: str, handler: Handler) -> Route:
        """Compile and append a route; returns the compiled Route."""
        route = compile_pattern(method, pattern, handler)
        self.add(route)
        return route

    @property
    def routes(self) -> list[Route]:
        """All registered routes in registration (dispatch) order."""
        return list(self._routes)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._routes = tuple(self._routes)
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Find the first route matching *method* and *path*.

        Parameter values are URL-decoded one segment at a time.

        Raises ``NotFound`` if no route matches, including when the path
        matches a route registered under a different method.
        """
        method = method.upper()
        parts = _split_request_path(normalize_path(path))
        if parts is not None:
            for route in self._routes:
                if route.method != method or len(route.segments) != len(parts):
                    continue
                if all(seg.matches(part) for seg, part in zip(route.segments, parts, strict=True)):
                    params = {
                        seg.param_name: unquote(part)
                        for seg, part in zip(route.segments, parts, strict=True)
                        if seg.param_name
                    }
                    return RouteMatch(route=route, path_params=params)

        raise NotFound()
