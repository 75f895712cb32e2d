"""Database model exports."""

from .leaderboard import BestTime, Leaderboard, LeaderboardEntry, TimeSubmission
from .time_record import TimeRecord

__all__ = [
    "BestTime",
    "Leaderboard",
    "LeaderboardEntry",
    "TimeRecord",
    "TimeSubmission",
]
