"""Service layer helpers."""

from .times import fetch_leaderboard, submit_best_time
from .validation import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    parse_submission,
    require_board,
    resolve_limit,
)

__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "fetch_leaderboard",
    "parse_submission",
    "require_board",
    "resolve_limit",
    "submit_best_time",
]
