"""Workout and cycle data models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from ..schedule.recurrence import RecurrenceRule


class WorkoutType(str, Enum):
    """How a workout's target is measured."""

    WEIGHT = "weight"  # target is a load in kg
    TIME = "time"  # target is a duration in minutes


@dataclass
class Workout:
    """A single exercise definition with its own schedule.

    When ``cycle_id`` is set the workout belongs to a cycle and its own
    ``rule`` is ignored in favour of the cycle's.
    """

    name: str
    rule: RecurrenceRule
    workout_type: WorkoutType = WorkoutType.WEIGHT
    target: float = 0.0
    sets: int = 3
    reps_per_set: int = 10
    rest_time: int = 60  # seconds
    notes: str | None = None
    ai_tip: str | None = None
    cycle_id: int | None = None
    cycle_order: int | None = None
    display_order: int = 0
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_cycle_member(self) -> bool:
        return self.cycle_id is not None

    @property
    def target_unit(self) -> str:
        return "min" if self.workout_type == WorkoutType.TIME else "kg"

    def get_target_display(self) -> str:
        """Get a human-readable target such as '3 x 10 @ 60 kg'."""
        target = f"{self.target:g} {self.target_unit}"
        if self.workout_type == WorkoutType.TIME:
            return f"{self.sets} x {target}"
        return f"{self.sets} x {self.reps_per_set} @ {target}"

    def to_dict(self) -> dict:
        """Convert to dictionary for storage and API output."""
        return {
            "id": self.id,
            "name": self.name,
            "workout_type": self.workout_type.value,
            "target": self.target,
            "sets": self.sets,
            "reps_per_set": self.reps_per_set,
            "rest_time": self.rest_time,
            "notes": self.notes,
            "ai_tip": self.ai_tip,
            **self.rule.to_dict(),
            "cycle_id": self.cycle_id,
            "cycle_order": self.cycle_order,
            "display_order": self.display_order,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "Workout":
        """Create from dictionary."""
        return cls(
            id=id,
            name=data["name"],
            rule=RecurrenceRule.from_dict(data),
            workout_type=WorkoutType(data.get("workout_type", "weight")),
            target=float(data.get("target", 0.0)),
            sets=int(data.get("sets", 3)),
            reps_per_set=int(data.get("reps_per_set", 10)),
            rest_time=int(data.get("rest_time", 60)),
            notes=data.get("notes"),
            ai_tip=data.get("ai_tip"),
            cycle_id=data.get("cycle_id"),
            cycle_order=data.get("cycle_order"),
            display_order=data.get("display_order", 0),
            created_at=created_at,
            updated_at=updated_at,
        )


@dataclass
class WorkoutCycle:
    """An ordered set of workouts rotating on one shared schedule.

    ``workouts`` is kept sorted by ``cycle_order``; that order is the
    round-robin sequence.
    """

    name: str
    rule: RecurrenceRule
    workouts: list[Workout] = field(default_factory=list)
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self):
        self.workouts.sort(
            key=lambda w: w.cycle_order if w.cycle_order is not None else len(self.workouts)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            **self.rule.to_dict(),
            "workouts": [w.to_dict() for w in self.workouts],
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


def inert_rule() -> RecurrenceRule:
    """Placeholder rule stored on cycle members."""
    return RecurrenceRule(start_date=date.today())
