"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...models import Leaderboard
from ...services import fetch_leaderboard, require_board, resolve_limit

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard", response_model=Leaderboard)
def get_leaderboard(
    group_key: Optional[str] = None,
    map_id: Optional[str] = None,
    limit: Optional[str] = None,
    session: Session = Depends(get_session),
) -> Leaderboard:
    """Get the ranked best times for one map within a group."""

    group_key, map_id = require_board(group_key, map_id)
    entries = fetch_leaderboard(session, group_key, map_id, resolve_limit(limit))
    return Leaderboard(entries=entries)


__all__ = ["router"]
