"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Nexus Blog backend and its terminal client.
"""

from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from pythonjsonlogger.json import JsonFormatter

ENV_FILE = Path(__file__).parent.parent.parent / ".env"
LOG_DIR = Path("logs")
LOG_FILE = LOG_DIR / "nexusblog.log"

# --- Constants ---
MAX_TITLE_LENGTH = 200
MAX_CONTENT_LENGTH = 50000
MAX_NAME_LENGTH = 100
MIN_PASSWORD_LENGTH = 6

# Response constants
DEFAULT_ERROR_MESSAGE = "An unexpected server error occurred."
POST_CREATE_ERROR = "Some error occurred while posting the blog."


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Nexus Blog Backend"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    LOG_TO_FILE: bool = False
    FRONTEND_ORIGINS: list[str] = ["http://localhost:5173"]

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./nexusblog.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 1800  # seconds

    # JWT Configuration
    JWT_SECRET: SecretStr = SecretStr("change-me")
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    # Blog listing
    BULK_LIMIT: int = 10
    SEARCH_DEFAULT_LIMIT: int = 10
    SEARCH_MAX_LIMIT: int = 100


settings = Settings()


class LimiterConfig(BaseSettings):
    """Rate limiter configuration, passed straight to slowapi's `Limiter`."""

    model_config = SettingsConfigDict(env_prefix="LIMITER_", case_sensitive=False)

    enabled: bool = True
    storage_uri: str = "memory://"
    headers_enabled: bool = False
    default_limits: list[str] = []


class ClientConfig(BaseSettings):
    """Terminal client configuration."""

    model_config = SettingsConfigDict(env_prefix="NEXUSBLOG_", case_sensitive=False)

    backend_url: str = "http://127.0.0.1:8787"
    token_file: Path = Path.home() / ".nexusblog" / "token"
    timeout: float = 10.0


def file_logger(logger: Logger) -> Logger:
    """
    Attach the rotating JSON file handler to `logger` when file logging is on.

    Args:
        logger: Logger to configure

    Returns:
        Logger: The same logger, for chaining at module import time
    """
    if not settings.LOG_TO_FILE:
        return logger

    if any(isinstance(handler, RotatingFileHandler) for handler in logger.handlers):
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3)
    handler.setFormatter(JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger
