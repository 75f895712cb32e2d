"""System-level API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.engine import Engine

from ...core import get_engine, ping

router = APIRouter(tags=["system"])


@router.get("/health", response_class=PlainTextResponse)
def health(engine: Engine = Depends(get_engine)) -> PlainTextResponse:
    """Readiness probe backed by a round trip to the store."""

    if not ping(engine):
        return PlainTextResponse("db not ready", status_code=503)
    return PlainTextResponse("ok")


__all__ = ["router"]
