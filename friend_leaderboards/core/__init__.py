"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_MAX_CONNECTIONS,
    HOST,
    LOG_LEVEL,
    PORT,
    STORE_TIMEOUT_MS,
)
from .database import build_engine, get_engine, get_session, init_schema, ping
from .errors import LeaderboardError, MalformedRequestError, StoreError, ValidationError
from .logging_config import setup_logging

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_MAX_CONNECTIONS",
    "HOST",
    "LOG_LEVEL",
    "PORT",
    "STORE_TIMEOUT_MS",
    "LeaderboardError",
    "MalformedRequestError",
    "StoreError",
    "ValidationError",
    "build_engine",
    "get_engine",
    "get_session",
    "init_schema",
    "ping",
    "setup_logging",
]
