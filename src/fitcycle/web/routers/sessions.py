"""Workout session routes."""

from datetime import date

from fastapi import APIRouter

from ...db.repositories import SessionRepository, WorkoutRepository
from ...forms.validation import SessionStartForm, SessionUpdateForm
from .common import not_found

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("")
async def list_sessions(start: date | None = None, end: date | None = None):
    """Sessions, optionally limited to a date range (inclusive)."""
    repo = SessionRepository()
    if start is None and end is None:
        sessions = await repo.list_all()
    else:
        sessions = await repo.list_between(start or date.min, end or date.max)
    return [s.to_dict() for s in sessions]


@router.post("", status_code=201)
async def start_session(form: SessionStartForm):
    """Start a session; returns the existing one if already started that day."""
    workout = await WorkoutRepository().get(form.workout_id)
    if not workout:
        return not_found("Workout")
    session = await SessionRepository().start(workout, form.date or date.today())
    return session.to_dict()


@router.put("/{session_id}")
async def update_session(session_id: int, form: SessionUpdateForm):
    """Record progress: completion, sets, reps, weight and duration."""
    session = await SessionRepository().update(session_id, form.model_dump(exclude_none=True))
    if not session:
        return not_found("Session")
    return session.to_dict()


@router.delete("/{session_id}")
async def delete_session(session_id: int):
    if not await SessionRepository().delete(session_id):
        return not_found("Session")
    return {"status": "deleted", "id": session_id}
