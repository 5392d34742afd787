"""
Global exception handlers for todo-api.

HTTP errors (404 for unknown paths, 405 for wrong methods) keep FastAPI's
default bodies and are only logged here. Anything else becomes a bare 500.
"""

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.structlog_config import get_logger


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_http_error_handler(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def logged_http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ):
        logger = get_logger(__name__)
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            logger.info(
                "Route not found",
                method=request.method,
                path=request.url.path,
            )
        else:
            logger.warning(
                "HTTP error",
                status_code=exc.status_code,
                method=request.method,
                path=request.url.path,
                detail=exc.detail,
            )
        return await http_exception_handler(request, exc)


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger = get_logger(__name__)
        logger.error(
            "Unhandled exception",
            method=request.method,
            path=request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error"},
        )
