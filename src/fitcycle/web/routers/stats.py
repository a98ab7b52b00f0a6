"""Statistics routes."""

from datetime import date

from fastapi import APIRouter, Query

from ...services.planner import PlannerService

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("")
async def get_stats():
    """Completion rate, totals, monthly breakdown and weight progress."""
    stats = await PlannerService().stats()
    return stats.to_dict()


@router.get("/weekly")
async def get_weekly_report(day: date | None = Query(default=None, alias="date")):
    """Report for the week containing ``date`` (default: today)."""
    report = await PlannerService().weekly_report(day)
    return report.to_dict()
