"""Map the service error taxonomy onto HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import LeaderboardError, StoreError

logger = logging.getLogger(__name__)


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


async def handle_leaderboard_error(request: Request, exc: LeaderboardError) -> JSONResponse:
    if isinstance(exc, StoreError):
        logger.error(
            "store failure request_id=%s %s %s",
            _request_id(request),
            request.method,
            request.url.path,
            exc_info=exc.__cause__ or exc,
        )
    else:
        logger.debug("rejected request_id=%s: %s", _request_id(request), exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def register_error_handlers(app: FastAPI) -> None:
    """Install the handler that renders errors as ``{"detail": ...}``."""

    app.add_exception_handler(LeaderboardError, handle_leaderboard_error)


__all__ = ["register_error_handlers"]
