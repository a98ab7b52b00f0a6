"""Statistics and report models."""

from dataclasses import asdict, dataclass, field
from datetime import date


@dataclass
class MonthlyStats:
    """Sessions started and completed in one calendar month."""

    month: str  # e.g. "Jan"
    total: int
    completed: int


@dataclass
class ProgressPoint:
    session: int
    weight: float
    date: str  # e.g. "Jan 5"


@dataclass
class WeightProgress:
    """Recent completed sessions of one workout."""

    workout_id: int
    workout_name: str
    workout_type: str
    data: list[ProgressPoint] = field(default_factory=list)


@dataclass
class Stats:
    """Overall training statistics."""

    total_completed: int
    total_scheduled: int
    completion_rate: int  # percent, 0-100
    total_sets: int
    total_reps: int
    total_workouts: int
    monthly_stats: list[MonthlyStats] = field(default_factory=list)
    weight_progress: list[WeightProgress] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class WeeklyReport:
    """Summary of one Monday-to-Sunday week compared with the week before."""

    week_start: date
    week_end: date
    completed: int
    last_week_completed: int
    total_sets: int
    total_reps: int
    total_weight_lifted: float
    workouts_trained: list[str] = field(default_factory=list)

    @property
    def change(self) -> int:
        """Completed sessions gained (or lost) versus last week."""
        return self.completed - self.last_week_completed

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "week_start": self.week_start.isoformat(),
            "week_end": self.week_end.isoformat(),
            "completed": self.completed,
            "last_week_completed": self.last_week_completed,
            "change": self.change,
            "total_sets": self.total_sets,
            "total_reps": self.total_reps,
            "total_weight_lifted": self.total_weight_lifted,
            "workouts_trained": self.workouts_trained,
        }
