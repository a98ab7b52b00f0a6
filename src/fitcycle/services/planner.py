"""Service tying the repositories to the calendar, today and stats views."""

from datetime import date, timedelta
from pathlib import Path

from loguru import logger

from ..config import get_settings
from ..db.repositories import CycleRepository, SessionRepository, WorkoutRepository
from ..models.session import WorkoutSession
from ..models.stats import Stats, WeeklyReport
from .schedule import CalendarDay, TodayPlan, build_calendar, build_today, month_grid
from .stats import compute_stats, weekly_report


class PlannerService:
    """Loads stored workouts, cycles and sessions and builds the views."""

    def __init__(self, db_path: Path | None = None):
        self.workouts = WorkoutRepository(db_path)
        self.cycles = CycleRepository(db_path)
        self.sessions = SessionRepository(db_path)

    async def calendar(self, year: int, month: int) -> list[CalendarDay]:
        """Month grid with due workouts and sessions per day."""
        days = month_grid(year, month)
        workouts = await self.workouts.list_all()
        cycles = await self.cycles.list_all()
        sessions = await self.sessions.list_between(days[0], days[-1])
        return build_calendar(year, month, workouts, cycles, sessions)

    async def today(self, day: date | None = None) -> TodayPlan:
        """What is due on ``day`` (default: today) and what has been started."""
        day = day or date.today()
        workouts = await self.workouts.list_all()
        cycles = await self.cycles.list_all()
        sessions = await self.sessions.list_for_day(day)
        return build_today(day, workouts, cycles, sessions)

    async def recent_sessions(self, day: date | None = None) -> list[WorkoutSession]:
        """Completed sessions in the look-back window before ``day``."""
        day = day or date.today()
        since = day - timedelta(days=get_settings().recent_days)
        return await self.sessions.list_completed_since(since, day)

    async def start_missing(self, day: date | None = None) -> list[WorkoutSession]:
        """Start a session for every workout due on ``day`` that has none yet."""
        plan = await self.today(day)
        started = [await self.sessions.start(workout, plan.day) for workout in plan.missing]
        if started:
            logger.info(f"Started {len(started)} session(s) for {plan.day}")
        return started

    async def stats(self, today: date | None = None) -> Stats:
        """Overall statistics as of ``today``."""
        settings = get_settings()
        today = today or date.today()
        return compute_stats(
            today,
            await self.workouts.list_all(),
            await self.cycles.list_all(),
            await self.sessions.list_all(),
            months=settings.stats_months,
            progress_sessions=settings.progress_sessions,
        )

    async def weekly_report(self, today: date | None = None) -> WeeklyReport:
        """Report for the week containing ``today`` versus the week before."""
        today = today or date.today()
        sessions = await self.sessions.list_between(today - timedelta(days=14), today + timedelta(days=7))
        return weekly_report(today, sessions)
