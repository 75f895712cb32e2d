"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from .api import RequestContextMiddleware, register_error_handlers, register_routes
from .core import ALLOWED_CORS_ORIGINS, HOST, LOG_LEVEL, PORT, build_engine, init_schema, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    owns_engine = app.state.engine is None
    engine = build_engine() if owns_engine else app.state.engine
    init_schema(engine)
    app.state.engine = engine
    try:
        yield
    finally:
        if owns_engine:
            engine.dispose()
            app.state.engine = None


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """Build the app; an injected ``engine`` is used as-is and never disposed here."""

    app = FastAPI(title="Friend Leaderboards API", version="0.1.0", lifespan=lifespan)
    app.state.engine = engine

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    register_error_handlers(app)
    register_routes(app)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    setup_logging(LOG_LEVEL)
    logger.info("listening on %s:%d", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_config=None, access_log=False)


if __name__ == "__main__":
    main()
