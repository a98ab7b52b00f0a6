"""Calendar and today views built on the schedule resolver."""

import calendar
from dataclasses import dataclass, field
from datetime import date, timedelta

from loguru import logger

from ..models.session import WorkoutSession
from ..models.workout import Workout, WorkoutCycle
from ..schedule.recurrence import cycle_workout_for, is_scheduled_on


@dataclass
class DueWorkout:
    """A workout due on some day, with the cycle that put it there (if any)."""

    workout: Workout
    cycle: WorkoutCycle | None = None

    def to_dict(self) -> dict:
        return {
            "workout": self.workout.to_dict(),
            "cycle_id": self.cycle.id if self.cycle else None,
            "cycle_name": self.cycle.name if self.cycle else None,
        }


@dataclass
class CalendarDay:
    """One cell of the month grid."""

    day: date
    in_month: bool
    due: list[DueWorkout] = field(default_factory=list)
    sessions: list[WorkoutSession] = field(default_factory=list)

    @property
    def all_completed(self) -> bool:
        """True if something was due and every due workout has a completed session."""
        if not self.due:
            return False
        completed_ids = {s.workout_id for s in self.sessions if s.completed}
        return all(d.workout.id in completed_ids for d in self.due)

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "in_month": self.in_month,
            "due": [d.to_dict() for d in self.due],
            "sessions": [s.to_dict() for s in self.sessions],
            "all_completed": self.all_completed,
        }


@dataclass
class TodayPlan:
    """What is due on a day and what the user has already started."""

    day: date
    due: list[DueWorkout]
    sessions: list[WorkoutSession]

    @property
    def missing(self) -> list[Workout]:
        """Due workouts without a session yet."""
        started = {s.workout_id for s in self.sessions}
        return [d.workout for d in self.due if d.workout.id not in started]

    @property
    def incomplete(self) -> list[WorkoutSession]:
        return [s for s in self.sessions if not s.completed]

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "due": [d.to_dict() for d in self.due],
            "sessions": [s.to_dict() for s in self.sessions],
            "missing": [w.to_dict() for w in self.missing],
            "incomplete": [s.to_dict() for s in self.incomplete],
            "has_all_sessions": not self.missing,
        }


def workouts_due_on(
    day: date, workouts: list[Workout], cycles: list[WorkoutCycle]
) -> list[DueWorkout]:
    """List the workouts due on ``day``.

    Standalone workouts are checked against their own rule; each cycle
    contributes at most one member, picked round-robin by the cycle's rule.
    """
    due = [
        DueWorkout(workout)
        for workout in workouts
        if not workout.is_cycle_member and is_scheduled_on(workout.rule, day)
    ]
    for cycle in cycles:
        member = cycle_workout_for(cycle.rule, day, cycle.workouts)
        if member is not None:
            due.append(DueWorkout(member, cycle))
    return due


def month_grid(year: int, month: int) -> list[date]:
    """Days shown for a month: whole Sunday-to-Saturday weeks covering it."""
    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])
    # Python weekdays start on Monday; shift so weeks start on Sunday.
    # Padding stops at date.min and date.max.
    before = min((first.weekday() + 1) % 7, (first - date.min).days)
    after = min((5 - last.weekday()) % 7, (date.max - last).days)
    start = first - timedelta(days=before)
    end = last + timedelta(days=after)
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def build_calendar(
    year: int,
    month: int,
    workouts: list[Workout],
    cycles: list[WorkoutCycle],
    sessions: list[WorkoutSession],
) -> list[CalendarDay]:
    """Build the month view with due workouts and sessions for every day."""
    sessions_by_day: dict[date, list[WorkoutSession]] = {}
    for session in sessions:
        sessions_by_day.setdefault(session.date, []).append(session)

    days = [
        CalendarDay(
            day=day,
            in_month=day.month == month,
            due=workouts_due_on(day, workouts, cycles),
            sessions=sessions_by_day.get(day, []),
        )
        for day in month_grid(year, month)
    ]
    logger.debug(
        f"Calendar {year}-{month:02d}: {sum(len(d.due) for d in days)} due workouts "
        f"over {len(days)} days"
    )
    return days


def build_today(
    day: date,
    workouts: list[Workout],
    cycles: list[WorkoutCycle],
    sessions: list[WorkoutSession],
) -> TodayPlan:
    """Build the plan for one day from all workouts and that day's sessions."""
    day_sessions = [s for s in sessions if s.date == day]
    return TodayPlan(
        day=day,
        due=workouts_due_on(day, workouts, cycles),
        sessions=day_sessions,
    )
