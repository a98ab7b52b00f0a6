"""Workout session model."""

from dataclasses import dataclass, field
from datetime import date, datetime

from .workout import Workout, WorkoutType


@dataclass
class WorkoutSession:
    """A workout the user started on a given day.

    There is at most one session per workout and calendar day. Sessions
    exist independently of whether the workout was actually due that day.
    """

    workout_id: int
    date: date
    completed: bool = False
    sets_completed: int = 0
    reps_per_set: list[int] = field(default_factory=list)
    weight_used: float | None = None
    duration: int | None = None  # seconds
    workout: Workout | None = None
    id: int | None = None
    created_at: datetime | None = None

    @property
    def total_reps(self) -> int:
        return sum(self.reps_per_set)

    def weight_lifted(self) -> float:
        """Total load moved in this session (weight x sets x reps).

        Time-based workouts contribute nothing.
        """
        if self.workout is None or self.workout.workout_type != WorkoutType.WEIGHT:
            return 0.0
        weight = self.weight_used or self.workout.target
        return weight * self.sets_completed * self.workout.reps_per_set

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "workout_id": self.workout_id,
            "date": self.date.isoformat(),
            "completed": self.completed,
            "sets_completed": self.sets_completed,
            "reps_per_set": list(self.reps_per_set),
            "weight_used": self.weight_used,
            "duration": self.duration,
            "workout": self.workout.to_dict() if self.workout else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def get_status_display(self) -> str:
        """Get a human-readable status string."""
        if self.completed:
            return "Completed"
        if self.sets_completed:
            return f"In Progress ({self.sets_completed} sets)"
        return "Not Started"
