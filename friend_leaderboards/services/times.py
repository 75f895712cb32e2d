"""Best-time upsert and ranked leaderboard reads against the ``times`` table."""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Tuple

from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import Select
from sqlmodel import Session, select

from ..core.errors import StoreError
from ..models import LeaderboardEntry, TimeRecord, TimeSubmission

logger = logging.getLogger(__name__)

# Per dialect: the native INSERT construct with ON CONFLICT support and the
# two-argument minimum. SQLite's scalar min(a, b) behaves like LEAST.
_UPSERT_DIALECTS: dict[str, Tuple[Callable[..., Any], Callable[..., Any]]] = {
    "postgresql": (postgresql.insert, func.least),
    "sqlite": (sqlite.insert, func.min),
}


def best_time_upsert(dialect: str, submission: TimeSubmission):
    """Build the single INSERT ... ON CONFLICT DO UPDATE statement for ``dialect``.

    On conflict the row keeps the smaller of the stored and incoming time, and
    ``updated_at`` is refreshed even when the time does not improve. The
    statement returns the stored best.
    """

    try:
        insert, least = _UPSERT_DIALECTS[dialect]
    except KeyError:
        raise RuntimeError(f"Unsupported database dialect: {dialect}") from None

    table = TimeRecord.__table__
    stmt = insert(table).values(
        group_key=submission.group_key,
        account_id=submission.account_id,
        map_id=submission.map_id,
        time_ms=submission.time_ms,
        created_at=func.now(),
        updated_at=func.now(),
    )
    return stmt.on_conflict_do_update(
        index_elements=[table.c.group_key, table.c.map_id, table.c.account_id],
        set_={
            "time_ms": least(stmt.excluded.time_ms, table.c.time_ms),
            "updated_at": func.now(),
        },
    ).returning(table.c.time_ms)


def leaderboard_query(group_key: str, map_id: str, limit: int) -> Select:
    """Ranked select for one board; ties on time are broken by account_id."""

    ordering = (TimeRecord.time_ms.asc(), TimeRecord.account_id.asc())
    rank = func.row_number().over(order_by=ordering).label("rank")

    return (
        select(TimeRecord.account_id, TimeRecord.map_id, TimeRecord.time_ms, rank)
        .where(TimeRecord.group_key == group_key, TimeRecord.map_id == map_id)
        .order_by(*ordering)
        .limit(limit)
    )


def submit_best_time(session: Session, submission: TimeSubmission) -> int:
    """Record ``submission`` and return the stored best time for its triple."""

    stmt = best_time_upsert(session.get_bind().dialect.name, submission)

    try:
        best = session.execute(stmt).scalar_one()
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise StoreError() from exc

    logger.debug(
        "best time %s/%s/%s -> %d ms",
        submission.group_key,
        submission.map_id,
        submission.account_id,
        best,
    )
    return int(best)


def fetch_leaderboard(
    session: Session, group_key: str, map_id: str, limit: int
) -> List[LeaderboardEntry]:
    """Top ``limit`` entries for a board with dense 1-based ranks."""

    try:
        rows = session.exec(leaderboard_query(group_key, map_id, limit)).all()
    except SQLAlchemyError as exc:
        raise StoreError() from exc

    return [
        LeaderboardEntry(
            account_id=account_id,
            map_id=row_map_id,
            time_ms=int(time_ms),
            rank=int(row_rank),
        )
        for account_id, row_map_id, time_ms, row_rank in rows
    ]


__all__ = [
    "best_time_upsert",
    "fetch_leaderboard",
    "leaderboard_query",
    "submit_best_time",
]
