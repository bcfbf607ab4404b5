"""Route, PathSegment, and RouteMatch frozen dataclasses."""

from dataclasses import dataclass

from havenox._internal.types import Handler


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A compiled segment of a route pattern.

    Literal: ``/listings``  (is_param=False, matched verbatim)
    Param:   ``/:id``       (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None

    def matches(self, part: str) -> bool:
        """Whether this segment accepts one raw path segment."""
        if self.is_param:
            return bool(part)
        return part == self.value


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created during app setup, compiled into the router at freeze time.
    ``segments`` is filled in by the router.
    """

    method: str
    pattern: str
    handler: Handler
    segments: tuple[PathSegment, ...] = ()
    name: str | None = None

    @property
    def param_names(self) -> tuple[str, ...]:
        """Parameter names in left-to-right order."""
        return tuple(seg.param_name for seg in self.segments if seg.param_name)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]
