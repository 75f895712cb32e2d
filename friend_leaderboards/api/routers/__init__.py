"""Aggregate API routers."""

from fastapi import APIRouter

from .leaderboard import router as leaderboard_router
from .system import router as system_router
from .times import router as times_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    times_router,
    leaderboard_router,
)

__all__ = ["ALL_ROUTERS"]
