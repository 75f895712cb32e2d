"""API shapes for submissions and ranked leaderboard rows."""

from __future__ import annotations

from typing import List

from sqlmodel import SQLModel


class TimeSubmission(SQLModel):
    """Validated payload of ``POST /times``."""

    group_key: str
    account_id: str
    map_id: str
    time_ms: int


class LeaderboardEntry(SQLModel):
    """One ranked row; rank is computed at read time, never stored."""

    account_id: str
    map_id: str
    time_ms: int
    rank: int


class BestTime(SQLModel):
    best_time_ms: int


class Leaderboard(SQLModel):
    entries: List[LeaderboardEntry]


__all__ = ["BestTime", "Leaderboard", "LeaderboardEntry", "TimeSubmission"]
