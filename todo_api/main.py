import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from pydantic import ValidationError

from todo_api import __version__
from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.routes import build_api_router
from todo_api.config import Settings, get_settings
from todo_api.route_table import DEFAULT_ROUTES, RouteTable
from todo_api.structlog_config import configure_structlog, get_logger


def load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        logging.critical(f"Configuration error:\n{e}")
        raise RuntimeError(f"Configuration error: {e}") from e


def create_app(
    route_table: Optional[RouteTable] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        route_table: Static routes to serve; defaults to DEFAULT_ROUTES
        settings: Application settings; read from the environment when omitted

    Returns:
        The configured application
    """
    route_table = DEFAULT_ROUTES if route_table is None else route_table
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_structlog(
            service_name=settings.SERVICE_NAME,
            log_level=settings.LOG_LEVEL,
            log_format=settings.LOG_FORMAT,
        )
        logger = get_logger(__name__)
        logger.info(
            "Application startup complete",
            routes=len(route_table),
            paths=list(route_table.paths),
            env_mode=settings.ENV_MODE.value,
            log_level=logging.getLevelName(settings.LOG_LEVEL),
        )
        yield
        logger.info("Application shutdown")

    app = FastAPI(
        title="Todo API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        redirect_slashes=False,
        lifespan=lifespan,
    )
    app.state.route_table = route_table
    app.state.settings = settings

    register_error_handlers(app)
    app.include_router(build_api_router(route_table))

    return app


app = create_app()
