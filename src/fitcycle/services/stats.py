"""Training statistics and weekly reports."""

from datetime import date, timedelta

from loguru import logger

from ..models.session import WorkoutSession
from ..models.stats import MonthlyStats, ProgressPoint, Stats, WeeklyReport, WeightProgress
from ..models.workout import Workout, WorkoutCycle
from ..schedule.recurrence import occurrences_up_to


def _shift_month(day: date, months: int) -> date:
    """First day of the month ``months`` before the month of ``day``."""
    index = day.year * 12 + (day.month - 1) - months
    return date(index // 12, index % 12 + 1, 1)


def total_scheduled(
    today: date, workouts: list[Workout], cycles: list[WorkoutCycle]
) -> int:
    """Count every occurrence due from each schedule's start through ``today``.

    Standalone workouts count their own occurrences. A cycle schedules one
    member per occurrence, so each cycle counts its own occurrences once.
    """
    count = sum(
        len(occurrences_up_to(w.rule, today)) for w in workouts if not w.is_cycle_member
    )
    count += sum(len(occurrences_up_to(c.rule, today)) for c in cycles if c.workouts)
    return count


def completion_rate(completed: int, scheduled: int) -> int:
    """Completed sessions as a whole percentage of scheduled ones (0-100)."""
    if scheduled <= 0:
        return 0
    return min(100, round(completed / scheduled * 100))


def monthly_stats(today: date, sessions: list[WorkoutSession], months: int) -> list[MonthlyStats]:
    """Sessions started and completed per month, oldest month first."""
    result = []
    for offset in range(months - 1, -1, -1):
        month_start = _shift_month(today, offset)
        next_month = _shift_month(today, offset - 1)
        month_sessions = [s for s in sessions if month_start <= s.date < next_month]
        result.append(
            MonthlyStats(
                month=month_start.strftime("%b"),
                total=len(month_sessions),
                completed=sum(1 for s in month_sessions if s.completed),
            )
        )
    return result


def weight_progress(
    workouts: list[Workout], sessions: list[WorkoutSession], limit: int
) -> list[WeightProgress]:
    """Last ``limit`` completed sessions of every workout."""
    completed = sorted((s for s in sessions if s.completed), key=lambda s: (s.date, s.id or 0))
    progress = []
    for workout in workouts:
        recent = [s for s in completed if s.workout_id == workout.id][-limit:]
        progress.append(
            WeightProgress(
                workout_id=workout.id,
                workout_name=workout.name,
                workout_type=workout.workout_type.value,
                data=[
                    ProgressPoint(
                        session=index + 1,
                        weight=s.weight_used or workout.target,
                        date=f"{s.date:%b} {s.date.day}",
                    )
                    for index, s in enumerate(recent)
                ],
            )
        )
    return progress


def compute_stats(
    today: date,
    workouts: list[Workout],
    cycles: list[WorkoutCycle],
    sessions: list[WorkoutSession],
    months: int = 6,
    progress_sessions: int = 10,
) -> Stats:
    """Compute overall training statistics.

    Args:
        today: Reference day; occurrences after it are not counted
        workouts: All workouts, cycle members included
        cycles: All cycles with their members
        sessions: All sessions
        months: Number of months in the monthly breakdown
        progress_sessions: Completed sessions kept per workout in progress series

    Returns:
        Stats with the completion rate measured against scheduled occurrences
    """
    completed = [s for s in sessions if s.completed]
    scheduled = total_scheduled(today, workouts, cycles)

    stats = Stats(
        total_completed=len(completed),
        total_scheduled=scheduled,
        completion_rate=completion_rate(len(completed), scheduled),
        total_sets=sum(s.sets_completed for s in completed),
        total_reps=sum(s.total_reps for s in completed),
        total_workouts=len(workouts),
        monthly_stats=monthly_stats(today, sessions, months),
        weight_progress=weight_progress(workouts, sessions, progress_sessions),
    )
    logger.debug(
        f"Stats as of {today}: {stats.total_completed}/{stats.total_scheduled} "
        f"({stats.completion_rate}%)"
    )
    return stats


def week_bounds(day: date) -> tuple[date, date]:
    """Monday and Sunday of the week containing ``day``."""
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=6)


def weekly_report(today: date, sessions: list[WorkoutSession]) -> WeeklyReport:
    """Summarise the current week's completed sessions against last week's."""
    week_start, week_end = week_bounds(today)
    last_start, last_end = week_bounds(week_start - timedelta(days=1))

    this_week = [s for s in sessions if s.completed and week_start <= s.date <= week_end]
    last_week = [s for s in sessions if s.completed and last_start <= s.date <= last_end]

    return WeeklyReport(
        week_start=week_start,
        week_end=week_end,
        completed=len(this_week),
        last_week_completed=len(last_week),
        total_sets=sum(s.sets_completed for s in this_week),
        total_reps=sum(s.total_reps for s in this_week),
        total_weight_lifted=sum(s.weight_lifted() for s in this_week),
        workouts_trained=sorted({s.workout.name for s in this_week if s.workout}),
    )
