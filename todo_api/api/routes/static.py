"""
Static message routes.

One GET endpoint per entry of the route table, each returning its message as
a bare JSON string. HEAD is answered on the same paths.
"""

from typing import Callable

from fastapi import APIRouter

from todo_api.route_table import RouteTable, StaticRoute


def _make_handler(route: StaticRoute) -> Callable[[], str]:
    message = route.message

    def handler() -> str:
        return message

    handler.__name__ = route.operation_name
    handler.__doc__ = route.summary or f"Returns {message!r}."
    return handler


def build_static_router(route_table: RouteTable) -> APIRouter:
    """Register GET and HEAD handlers for every route in the table."""
    router = APIRouter(tags=["todo"])
    for route in route_table:
        handler = _make_handler(route)
        router.add_api_route(
            route.path,
            handler,
            methods=["GET"],
            response_model=str,
            name=route.operation_name,
            summary=route.summary,
        )
        # Registered after GET so a 405 advertises "Allow: GET"
        router.add_api_route(
            route.path,
            handler,
            methods=["HEAD"],
            response_model=str,
            name=f"{route.operation_name}_head",
            include_in_schema=False,
        )
    return router
