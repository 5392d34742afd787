import logging
import os

import pytest
import structlog
from fastapi.testclient import TestClient

from todo_api.config import Settings
from todo_api.main import create_app

SETTINGS_ENV_VARS = ("SERVICE_NAME", "ENV_MODE", "LOG_LEVEL", "LOG_FORMAT", "HOST", "PORT")


@pytest.fixture(autouse=True, scope="session")
def set_test_env_vars():
    os.environ.setdefault("ENV_MODE", "test")
    os.environ.setdefault("LOG_LEVEL", "INFO")


@pytest.fixture(autouse=True)
def restore_logging():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def clean_env(monkeypatch):
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def settings():
    return Settings(_env_file=None, ENV_MODE="test")


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings=settings)) as c:
        yield c
