import pytest
from pydantic import ValidationError

from todo_api.exceptions import RouteTableError, TodoApiException
from todo_api.route_table import DEFAULT_ROUTES, StaticRoute, build_route_table

pytestmark = pytest.mark.unit


def test_default_routes_paths_in_order():
    assert DEFAULT_ROUTES.paths == (
        "/",
        "/todo",
        "/todo/school",
        "/todo/watch",
        "/todo/read",
        "/todo/make",
    )
    assert len(DEFAULT_ROUTES) == 6


def test_default_routes_messages():
    assert DEFAULT_ROUTES.get("/").message == "Rocket server is running"
    assert DEFAULT_ROUTES.get("/todo").message == "Todo is working"
    assert DEFAULT_ROUTES.get("/todo/make").message == "to make sample"
    assert DEFAULT_ROUTES.get("/todo/xyz") is None


def test_default_routes_do_not_include_alternate_todo_message():
    messages = {route.message for route in DEFAULT_ROUTES}
    assert "Hello from rust and mongoDB" not in messages


def test_build_from_pairs():
    table = build_route_table([("/a", "alpha"), ("/b", "beta")])
    assert [route.path for route in table] == ["/a", "/b"]
    assert "/a" in table
    assert "/c" not in table


def test_duplicate_path_rejected():
    with pytest.raises(RouteTableError, match="Duplicate route path: /todo"):
        build_route_table([("/todo", "Todo is working"), ("/todo", "other")])


def test_empty_table_rejected():
    with pytest.raises(RouteTableError):
        build_route_table([])


def test_relative_path_rejected():
    with pytest.raises(RouteTableError):
        build_route_table([("todo", "Todo is working")])


def test_malformed_pair_rejected():
    with pytest.raises(RouteTableError):
        build_route_table([("/only-a-path",)])


def test_route_table_error_is_package_exception():
    assert issubclass(RouteTableError, TodoApiException)


def test_static_route_is_frozen():
    route = StaticRoute(path="/x", message="x")
    with pytest.raises(ValidationError):
        route.message = "changed"


def test_static_route_rejects_path_parameters():
    with pytest.raises(ValidationError):
        StaticRoute(path="/todo/{item}", message="x")


@pytest.mark.parametrize(
    "route,expected",
    [
        (StaticRoute(path="/", message="m"), "get_root"),
        (StaticRoute(path="/todo/school", message="m"), "get_todo_school"),
        (StaticRoute(path="/todo", message="m", name="todo_header"), "todo_header"),
    ],
)
def test_operation_name(route, expected):
    assert route.operation_name == expected
