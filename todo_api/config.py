import logging
import sys
from enum import Enum
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)-8s] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stdout,
)


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class EnvMode(str, Enum):
    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TEST = "test"


class Settings(BaseSettings):
    SERVICE_NAME: str = "todo-api"
    ENV_MODE: EnvMode = EnvMode.PRODUCTION

    LOG_LEVEL: int = logging.INFO
    LOG_FORMAT: LogFormat = LogFormat.JSON

    # Server binding, used by the uvicorn entry point only
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def parse_log_level(cls, v: Any) -> int:
        if isinstance(v, int):
            return v
        if isinstance(v, str):
            if v.strip().isdigit():
                return int(v)
            # Accepts 'INFO', 'DEBUG', etc. (case-insensitive)
            level = logging.getLevelName(v.strip().upper())
            if isinstance(level, int):
                return level
            raise ValueError(f"Invalid log level: {v}")
        raise ValueError(f"LOG_LEVEL must be int or str, got {type(v)}")

    @field_validator("LOG_FORMAT", "ENV_MODE", mode="before")
    @classmethod
    def lowercase_enums(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {v}")
        return v

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="forbid"
    )


def get_settings() -> Settings:
    """
    Returns a fresh Settings instance, reading environment variables at call time.
    Tests can patch os.environ or use monkeypatch before calling get_settings().
    """
    return Settings()
