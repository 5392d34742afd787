from fastapi import APIRouter

from todo_api.exceptions import RouteTableError
from todo_api.route_table import RouteTable

from .health import router as health_router
from .static import build_static_router

# Paths served by the system routers; static routes may not shadow them
RESERVED_PATHS = frozenset({"/health"})


def build_api_router(route_table: RouteTable) -> APIRouter:
    clashes = sorted(RESERVED_PATHS.intersection(route_table.paths))
    if clashes:
        raise RouteTableError(f"Route table uses reserved paths: {', '.join(clashes)}")

    api_router = APIRouter()
    api_router.include_router(health_router)
    api_router.include_router(build_static_router(route_table))
    return api_router
