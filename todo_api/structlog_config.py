"""
Structlog configuration for structured logging in todo-api.

JSON lines in production (serialized with orjson), colored console output
for local development.
"""

import logging
import sys
from typing import Any, Dict

import orjson
import structlog

from todo_api.config import LogFormat

_service_name = "todo-api"


def orjson_serializer(obj: Any, **kwargs) -> str:
    """
    JSON serializer for structlog's JSONRenderer.

    orjson returns bytes, so the result is decoded to str for the stdlib handler.
    """
    return orjson.dumps(obj, option=orjson.OPT_UTC_Z).decode()


def add_service_name(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add service name to all log entries."""
    event_dict["service"] = _service_name
    return event_dict


def add_module_info(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add the stdlib logger name as module."""
    name = getattr(logger, "name", None)
    if name and name != "root":
        event_dict["module"] = name
    return event_dict


def build_processors(log_format: LogFormat) -> list:
    shared = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_name,
        add_module_info,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if log_format == LogFormat.CONSOLE:
        return shared + [structlog.dev.ConsoleRenderer(colors=True)]
    return shared + [structlog.processors.JSONRenderer(serializer=orjson_serializer)]


def configure_structlog(
    service_name: str = "todo-api",
    log_level: int = logging.INFO,
    log_format: LogFormat = LogFormat.JSON,
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        service_name: Name of the service for log identification
        log_level: Logging level to set
        log_format: JSON lines or human-readable console output
    """
    global _service_name
    _service_name = service_name

    structlog.configure(
        processors=build_processors(LogFormat(log_format)),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove all existing handlers to prevent duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Renderers produce the full line; the handler emits it as-is
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)


def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Lazy logger proxy, bound to the processors on its first use
    """
    return structlog.get_logger(name)
