"""Database configuration and session helpers."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from .config import DATABASE_URL, DB_MAX_CONNECTIONS, STORE_TIMEOUT_MS

logger = logging.getLogger(__name__)


def build_engine(
    url: str = DATABASE_URL,
    max_connections: int = DB_MAX_CONNECTIONS,
    timeout_ms: int = STORE_TIMEOUT_MS,
) -> Engine:
    """Create the process-wide engine with every statement bounded by ``timeout_ms``."""

    parsed = make_url(url)
    timeout_s = timeout_ms / 1000

    if parsed.get_backend_name() == "sqlite":
        connect_args: Dict[str, Any] = {"check_same_thread": False, "timeout": timeout_s}
        if parsed.database in (None, "", ":memory:"):
            return create_engine(url, connect_args=connect_args, poolclass=StaticPool)
        return create_engine(url, connect_args=connect_args)

    return create_engine(
        url,
        pool_size=max_connections,
        max_overflow=0,
        pool_timeout=timeout_s,
        pool_pre_ping=True,
        connect_args={
            "connect_timeout": max(1, int(timeout_s)),
            "options": f"-c statement_timeout={timeout_ms}",
        },
    )


def init_schema(engine: Engine) -> None:
    """Create the ``times`` table and its ranking index if missing."""

    from .. import models  # noqa: F401 - ensure models are registered with SQLModel

    SQLModel.metadata.create_all(engine)
    logger.info("schema ready on %s", engine.url.render_as_string(hide_password=True))


def ping(engine: Engine) -> bool:
    """Return True when the store answers a trivial query."""

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("store ping failed: %s", exc)
        return False
    return True


def get_engine(request: Request) -> Engine:
    """FastAPI dependency returning the engine owned by the running app."""

    return request.app.state.engine


def get_session(request: Request) -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(get_engine(request)) as session:
        yield session


__all__ = ["build_engine", "get_engine", "get_session", "init_schema", "ping"]
