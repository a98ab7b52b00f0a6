"""Input forms and interactive prompts."""

from .validation import (
    CycleForm,
    CycleMemberForm,
    ReorderForm,
    ScheduleForm,
    SessionStartForm,
    SessionUpdateForm,
    WorkoutForm,
)

__all__ = [
    "CycleForm",
    "CycleMemberForm",
    "ReorderForm",
    "ScheduleForm",
    "SessionStartForm",
    "SessionUpdateForm",
    "WorkoutForm",
]
