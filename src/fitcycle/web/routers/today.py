"""Today view routes."""

from datetime import date

from fastapi import APIRouter, Query

from ...services.planner import PlannerService

router = APIRouter(prefix="/today", tags=["today"])


@router.get("")
async def today_plan(day: date | None = Query(default=None, alias="date")):
    """Workouts due on a day, their sessions and recent completed sessions."""
    planner = PlannerService()
    plan = await planner.today(day)
    recent = await planner.recent_sessions(plan.day)
    return {
        **plan.to_dict(),
        "recent_sessions": [s.to_dict() for s in recent],
    }


@router.post("/start")
async def start_today(day: date | None = Query(default=None, alias="date")):
    """Start sessions for every due workout that has none yet."""
    started = await PlannerService().start_missing(day)
    return {
        "status": "started",
        "sessions": [s.to_dict() for s in started],
    }
