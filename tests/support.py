"""Shared fixtures for API tests: an app wired to a private in-memory store."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from friend_leaderboards.app import create_app
from friend_leaderboards.core import build_engine
from friend_leaderboards.models import TimeRecord


def memory_engine() -> Engine:
    return build_engine("sqlite://")


def make_client(engine: Engine) -> TestClient:
    return TestClient(create_app(engine=engine))


def submission(account_id: str = "alice", time_ms=5000, group_key: str = "g1", map_id: str = "m1") -> dict:
    return {
        "group_key": group_key,
        "account_id": account_id,
        "map_id": map_id,
        "time_ms": time_ms,
    }


def stored_record(engine: Engine, group_key: str, map_id: str, account_id: str) -> Optional[TimeRecord]:
    with Session(engine) as session:
        return session.exec(
            select(TimeRecord).where(
                TimeRecord.group_key == group_key,
                TimeRecord.map_id == map_id,
                TimeRecord.account_id == account_id,
            )
        ).first()


def count_records(engine: Engine) -> int:
    with Session(engine) as session:
        return len(session.exec(select(TimeRecord)).all())


def seed_record(engine: Engine, stamp: datetime, **fields) -> None:
    """Insert a row directly with fixed timestamps."""
    with Session(engine) as session:
        session.add(TimeRecord(created_at=stamp, updated_at=stamp, **fields))
        session.commit()
