"""Application settings and environment helpers."""

from __future__ import annotations

import os
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


def normalize_database_url(url: str) -> str:
    """Turn libpq-style ``postgres://`` URLs into SQLAlchemy driver URLs."""

    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+psycopg2://" + url[len(prefix):]
    return url


# Store ----------------------------------------------------------------------
# Default matches the local compose stack.
DATABASE_URL = normalize_database_url(
    os.getenv("DATABASE_URL")
    or "postgresql+psycopg2://fpl_user:fpl_password@db:5432/friend_leaderboards"
)
DB_MAX_CONNECTIONS = _env_int("DB_MAX_CONNECTIONS", 8)
STORE_TIMEOUT_MS = _env_int("STORE_TIMEOUT_MS", 3000)


# HTTP server ----------------------------------------------------------------
HOST = os.getenv("HOST", "0.0.0.0")
PORT = _env_int("PORT", 8080)

ALLOWED_CORS_ORIGINS = _unique(_split_csv(os.getenv("ALLOWED_CORS_ORIGINS")))


# Runtime behaviour ----------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_MAX_CONNECTIONS",
    "HOST",
    "LOG_LEVEL",
    "PORT",
    "STORE_TIMEOUT_MS",
    "normalize_database_url",
]
