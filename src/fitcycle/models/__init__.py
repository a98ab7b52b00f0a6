"""Data models for fitcycle."""

from .session import WorkoutSession
from .stats import MonthlyStats, ProgressPoint, Stats, WeeklyReport, WeightProgress
from .workout import Workout, WorkoutCycle, WorkoutType

__all__ = [
    "MonthlyStats",
    "ProgressPoint",
    "Stats",
    "WeeklyReport",
    "WeightProgress",
    "Workout",
    "WorkoutCycle",
    "WorkoutSession",
    "WorkoutType",
]
