"""CLI commands for fitcycle."""

from .calendar import calendar
from .cycles import cycles
from .init import init
from .serve import serve
from .sessions import sessions
from .stats import report, stats
from .today import today
from .workouts import workouts

__all__ = [
    "calendar",
    "cycles",
    "init",
    "report",
    "serve",
    "sessions",
    "stats",
    "today",
    "workouts",
]
