"""
Static route table for todo-api.

The table is built once at startup and handed to ``create_app``. Each entry
binds a ``GET`` path to the fixed message returned as a JSON string.
"""

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todo_api.exceptions import RouteTableError


class StaticRoute(BaseModel):
    """A GET path bound to a constant response message."""

    path: str
    message: str
    name: Optional[str] = Field(default=None, description="OpenAPI operation name")
    summary: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"path must start with '/': {v!r}")
        if any(c in v for c in "{}?#"):
            raise ValueError(f"path must be a literal path: {v!r}")
        return v

    @property
    def operation_name(self) -> str:
        if self.name:
            return self.name
        segments = [s for s in self.path.strip("/").split("/") if s]
        return "_".join(["get"] + segments) if segments else "get_root"


RouteSpec = Union[StaticRoute, Tuple[str, str]]


class RouteTable:
    """Immutable, ordered collection of static routes with unique paths."""

    __slots__ = ("_routes", "_by_path")

    def __init__(self, routes: Tuple[StaticRoute, ...]):
        self._routes = routes
        self._by_path: Mapping[str, StaticRoute] = MappingProxyType(
            {route.path: route for route in routes}
        )

    def __iter__(self) -> Iterator[StaticRoute]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, path: object) -> bool:
        return path in self._by_path

    def __repr__(self) -> str:
        return f"RouteTable({[route.path for route in self._routes]!r})"

    @property
    def paths(self) -> Tuple[str, ...]:
        return tuple(self._by_path)

    def get(self, path: str) -> Optional[StaticRoute]:
        return self._by_path.get(path)


def _coerce(spec: RouteSpec) -> StaticRoute:
    if isinstance(spec, StaticRoute):
        return spec
    try:
        path, message = spec
        return StaticRoute(path=path, message=message)
    except (TypeError, ValueError) as e:
        # pydantic's ValidationError is a ValueError
        raise RouteTableError(f"Invalid route definition {spec!r}: {e}") from e


def build_route_table(routes: Iterable[RouteSpec]) -> RouteTable:
    """
    Build an immutable route table.

    Args:
        routes: StaticRoute instances or (path, message) pairs

    Returns:
        The route table, preserving the given order

    Raises:
        RouteTableError: if the table is empty, a route is malformed, or a path
            is defined more than once
    """
    built = []
    seen = set()
    for spec in routes:
        route = _coerce(spec)
        if route.path in seen:
            raise RouteTableError(f"Duplicate route path: {route.path}")
        seen.add(route.path)
        built.append(route)

    if not built:
        raise RouteTableError("Route table must contain at least one route")

    return RouteTable(tuple(built))


DEFAULT_ROUTES = build_route_table(
    [
        StaticRoute(path="/", message="Rocket server is running", name="hello", summary="Server banner"),
        StaticRoute(path="/todo", message="Todo is working", name="todo_header", summary="Todo index"),
        StaticRoute(path="/todo/school", message="school todo sample", name="todo_school"),
        StaticRoute(path="/todo/watch", message="to watch sample", name="todo_watch"),
        StaticRoute(path="/todo/read", message="to read sample", name="todo_read"),
        StaticRoute(path="/todo/make", message="to make sample", name="todo_make"),
    ]
)
