"""Services that turn stored workouts and sessions into views."""

from .planner import PlannerService
from .schedule import (
    CalendarDay,
    DueWorkout,
    TodayPlan,
    build_calendar,
    build_today,
    workouts_due_on,
)
from .stats import compute_stats, weekly_report
from .tips import suggest_tip

__all__ = [
    "build_calendar",
    "build_today",
    "CalendarDay",
    "compute_stats",
    "DueWorkout",
    "PlannerService",
    "suggest_tip",
    "TodayPlan",
    "weekly_report",
    "workouts_due_on",
]
