"""Error taxonomy shared by handlers and the store."""

from __future__ import annotations


class LeaderboardError(Exception):
    """Base error carrying the HTTP status and the message shown to callers."""

    status_code = 500
    detail = "internal error"

    def __init__(self, detail: str | None = None) -> None:
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class MalformedRequestError(LeaderboardError):
    """Request body could not be decoded into the expected shape."""

    status_code = 400
    detail = "invalid json"


class ValidationError(LeaderboardError):
    """Request decoded fine but its fields are missing or out of range."""

    status_code = 400
    detail = "missing required fields"


class StoreError(LeaderboardError):
    """Store unreachable, timed out or rejected the statement."""

    status_code = 500
    detail = "db error"

    def __init__(self) -> None:
        # Callers never see internal detail; the cause is chained for the logs.
        super().__init__()


__all__ = [
    "LeaderboardError",
    "MalformedRequestError",
    "StoreError",
    "ValidationError",
]
