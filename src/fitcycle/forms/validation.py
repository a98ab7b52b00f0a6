"""Input forms shared by the web API and the CLI.

The schedule resolver accepts any rule and simply never matches a
degenerate one; rejecting such rules before they are stored is done here.
"""

import datetime as dt
from datetime import date

from pydantic import BaseModel, Field, field_validator, model_validator

from ..models.workout import Workout, WorkoutCycle, WorkoutType, inert_rule
from ..schedule.recurrence import RecurrenceRule


class ScheduleForm(BaseModel):
    """Recurrence settings: an interval in days or a set of weekdays (0=Sunday)."""

    interval_days: int | None = Field(default=None, ge=1)
    schedule_days: list[int] = Field(default_factory=list)
    start_date: date = Field(default_factory=date.today)

    @field_validator("schedule_days")
    @classmethod
    def validate_weekdays(cls, value: list[int]) -> list[int]:
        """Weekdays must be 0 (Sunday) through 6 (Saturday)."""
        invalid = [d for d in value if d < 0 or d > 6]
        if invalid:
            raise ValueError(f"Invalid weekday(s) {invalid}; use 0 (Sunday) to 6 (Saturday)")
        return sorted(set(value))

    @model_validator(mode="after")
    def require_schedule_mode(self):
        """A schedule needs either weekdays or an interval."""
        if not self.schedule_days and self.interval_days is None:
            raise ValueError("Choose weekdays or an interval in days")
        return self

    def to_rule(self) -> RecurrenceRule:
        return RecurrenceRule(
            start_date=self.start_date,
            interval_days=self.interval_days,
            schedule_days=frozenset(self.schedule_days),
        )


class CycleMemberForm(BaseModel):
    """A workout inside a cycle; scheduling comes from the cycle."""

    name: str = Field(min_length=1, max_length=100)
    workout_type: WorkoutType = WorkoutType.WEIGHT
    target: float = Field(default=0.0, ge=0)
    sets: int = Field(default=3, ge=1)
    reps_per_set: int = Field(default=10, ge=1)
    rest_time: int = Field(default=60, ge=0)
    notes: str | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name must not be blank")
        return value

    def to_workout(self) -> Workout:
        return Workout(
            name=self.name,
            rule=inert_rule(),
            workout_type=self.workout_type,
            target=self.target,
            sets=self.sets,
            reps_per_set=self.reps_per_set,
            rest_time=self.rest_time,
            notes=self.notes or None,
        )


class WorkoutForm(CycleMemberForm, ScheduleForm):
    """A standalone workout with its own schedule."""

    def to_workout(self) -> Workout:
        workout = super().to_workout()
        workout.rule = self.to_rule()
        return workout

    def apply_to(self, workout: Workout) -> Workout:
        """Copy the form values onto an existing workout."""
        workout.name = self.name
        workout.workout_type = self.workout_type
        workout.target = self.target
        workout.sets = self.sets
        workout.reps_per_set = self.reps_per_set
        workout.rest_time = self.rest_time
        workout.notes = self.notes or None
        workout.rule = self.to_rule()
        return workout


class CycleForm(ScheduleForm):
    """A named cycle: a schedule and the ordered workouts it rotates through."""

    name: str = Field(min_length=1, max_length=100)
    workouts: list[CycleMemberForm] = Field(min_length=1)

    def to_cycle(self, cycle_id: int | None = None) -> WorkoutCycle:
        return WorkoutCycle(
            id=cycle_id,
            name=self.name.strip(),
            rule=self.to_rule(),
            workouts=[member.to_workout() for member in self.workouts],
        )


class SessionStartForm(BaseModel):
    workout_id: int
    date: dt.date | None = None


class SessionUpdateForm(BaseModel):
    """Partial session update; omitted fields are left unchanged."""

    completed: bool | None = None
    sets_completed: int | None = Field(default=None, ge=0)
    reps_per_set: list[int] | None = None
    weight_used: float | None = Field(default=None, ge=0)
    duration: int | None = Field(default=None, ge=0)

    @field_validator("reps_per_set")
    @classmethod
    def validate_reps(cls, value: list[int] | None) -> list[int] | None:
        if value is not None and any(r < 0 for r in value):
            raise ValueError("Reps must not be negative")
        return value


class ReorderForm(BaseModel):
    workout_ids: list[int]
