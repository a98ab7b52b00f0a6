"""Calendar routes."""

from datetime import date

from fastapi import APIRouter, Query

from ...services.planner import PlannerService

router = APIRouter(prefix="/calendar", tags=["calendar"])


@router.get("")
async def month_calendar(
    year: int | None = Query(default=None, ge=1, le=9999),
    month: int | None = Query(default=None, ge=1, le=12),
):
    """Month grid (whole Sunday-to-Saturday weeks) with due workouts and sessions."""
    today = date.today()
    year = year or today.year
    month = month or today.month
    days = await PlannerService().calendar(year, month)
    return {
        "year": year,
        "month": month,
        "days": [day.to_dict() for day in days],
    }
