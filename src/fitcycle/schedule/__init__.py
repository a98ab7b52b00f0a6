"""Schedule resolution for workouts and cycles."""

from .recurrence import (
    RecurrenceRule,
    cycle_workout_for,
    cycle_workout_index_for,
    is_scheduled_on,
    occurrences_up_to,
    to_day,
    weekday_number,
)

__all__ = [
    "cycle_workout_for",
    "cycle_workout_index_for",
    "is_scheduled_on",
    "occurrences_up_to",
    "RecurrenceRule",
    "to_day",
    "weekday_number",
]
