class TodoApiException(Exception):
    """
    Base exception for todo-api errors.

    Allows callers to catch anything raised by this package in one place.
    """

    pass


class RouteTableError(TodoApiException):
    """Raised when a route table cannot be built from the given routes."""

    pass
