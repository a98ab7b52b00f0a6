"""Database layer for fitcycle."""

from .engine import connect, get_db_path, init_db
from .repositories import (
    CycleRepository,
    SessionRepository,
    WorkoutRepository,
)

__all__ = [
    "connect",
    "CycleRepository",
    "get_db_path",
    "init_db",
    "SessionRepository",
    "WorkoutRepository",
]
