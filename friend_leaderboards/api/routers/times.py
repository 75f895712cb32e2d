"""Best-time submission endpoint."""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from ...core import MalformedRequestError, get_session
from ...models import BestTime
from ...services import parse_submission, submit_best_time

router = APIRouter(tags=["times"])


async def json_body(request: Request) -> Any:
    """Decode the raw body as JSON whatever the declared content type."""

    try:
        return json.loads(await request.body())
    except ValueError as exc:
        raise MalformedRequestError() from exc


@router.post("/times", response_model=BestTime)
def submit_time(body: Any = Depends(json_body), session: Session = Depends(get_session)) -> BestTime:
    """Submit a completion time; the stored best only ever goes down."""

    submission = parse_submission(body)
    return BestTime(best_time_ms=submit_best_time(session, submission))


__all__ = ["json_body", "router"]
