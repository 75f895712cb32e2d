"""Request plumbing: request IDs, access logging and crash recovery."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag every request with an ID, log it, and turn crashes into a 500.

    An incoming ``X-Request-ID`` is reused, otherwise a new one is generated.
    The ID is stored on ``request.state.request_id`` and echoed back.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "unhandled error request_id=%s %s %s",
                request_id,
                request.method,
                request.url.path,
            )
            response = JSONResponse(status_code=500, content={"detail": "internal error"})

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            '%s "%s %s" %d %.1fms request_id=%s',
            request.client.host if request.client else "-",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        return response


__all__ = ["REQUEST_ID_HEADER", "RequestContextMiddleware"]
