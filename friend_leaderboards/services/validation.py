"""Input checks for submissions and leaderboard queries."""

from __future__ import annotations

import re
from typing import Any, Optional, Tuple

from ..core.errors import MalformedRequestError, ValidationError
from ..models import TimeSubmission

DEFAULT_LIMIT = 50
MAX_LIMIT = 500

# time_ms is stored as BIGINT.
MIN_TIME_MS = -(2**63)
MAX_TIME_MS = 2**63 - 1

_IDENTIFIER_FIELDS = ("group_key", "account_id", "map_id")
_LIMIT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _is_int64(value: Any) -> bool:
    # bool is an int subclass; JSON true must not count as 1 ms.
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and MIN_TIME_MS <= value <= MAX_TIME_MS
    )


def parse_submission(body: Any) -> TimeSubmission:
    """Turn a decoded JSON body into a submission or raise a client error.

    Wrong shapes (non-object body, non-string identifier, non-integer or
    out-of-range ``time_ms``) are malformed. Absent, null, empty or
    non-positive values are validation errors. A ``null`` body counts as an
    empty object.
    """

    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise MalformedRequestError()

    for name in _IDENTIFIER_FIELDS:
        value = body.get(name)
        if value is not None and not isinstance(value, str):
            raise MalformedRequestError()
    time_ms = body.get("time_ms")
    if time_ms is not None and not _is_int64(time_ms):
        raise MalformedRequestError()

    if not all(body.get(name) for name in _IDENTIFIER_FIELDS):
        raise ValidationError()
    if time_ms is None or time_ms <= 0:
        raise ValidationError()

    return TimeSubmission(
        group_key=body["group_key"],
        account_id=body["account_id"],
        map_id=body["map_id"],
        time_ms=time_ms,
    )


def require_board(group_key: Optional[str], map_id: Optional[str]) -> Tuple[str, str]:
    """Return (group_key, map_id) when both are present and non-empty."""

    if not group_key or not map_id:
        raise ValidationError("group_key and map_id are required")
    return group_key, map_id


def resolve_limit(raw: Optional[str]) -> int:
    """Accept ``raw`` only as a plain decimal integer in [1, MAX_LIMIT]; anything else is the default."""

    if raw is None or not _LIMIT_PATTERN.fullmatch(raw):
        return DEFAULT_LIMIT
    value = int(raw)
    if 0 < value <= MAX_LIMIT:
        return value
    return DEFAULT_LIMIT


__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "MAX_TIME_MS",
    "parse_submission",
    "require_board",
    "resolve_limit",
]
