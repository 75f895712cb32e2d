"""Database model for best completion times."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Index, func
from sqlmodel import Field as ORMField, SQLModel


class TimeRecord(SQLModel, table=True):
    """Best time for one (group_key, map_id, account_id) triple.

    Timestamps are assigned by the database.
    """

    __tablename__ = "times"
    __table_args__ = (
        CheckConstraint("time_ms > 0", name="times_time_ms_positive"),
        Index("idx_times_group_map_time", "group_key", "map_id", "time_ms"),
    )

    group_key: str = ORMField(primary_key=True)
    map_id: str = ORMField(primary_key=True)
    account_id: str = ORMField(primary_key=True)
    time_ms: int = ORMField(sa_type=BigInteger, nullable=False)
    created_at: Optional[datetime] = ORMField(
        default=None,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"server_default": func.now()},
        nullable=False,
    )
    updated_at: Optional[datetime] = ORMField(
        default=None,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"server_default": func.now()},
        nullable=False,
    )


__all__ = ["TimeRecord"]
