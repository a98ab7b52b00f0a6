"""Cycle routes."""

from fastapi import APIRouter

from ...db.repositories import CycleRepository
from ...forms.validation import CycleForm
from ...models.workout import WorkoutCycle
from ...services.tips import suggest_tip
from .common import not_found

router = APIRouter(prefix="/cycles", tags=["cycles"])


def _with_tips(cycle: WorkoutCycle) -> WorkoutCycle:
    for workout in cycle.workouts:
        workout.ai_tip = workout.ai_tip or suggest_tip(workout.name)
    return cycle


@router.get("")
async def list_cycles():
    """All cycles with their members in rotation order."""
    cycles = await CycleRepository().list_all()
    return [c.to_dict() for c in cycles]


@router.post("", status_code=201)
async def create_cycle(form: CycleForm):
    """Create a cycle and its member workouts."""
    repo = CycleRepository()
    cycle_id = await repo.create(_with_tips(form.to_cycle()))
    return (await repo.get(cycle_id)).to_dict()


@router.get("/{cycle_id}")
async def get_cycle(cycle_id: int):
    cycle = await CycleRepository().get(cycle_id)
    if not cycle:
        return not_found("Cycle")
    return cycle.to_dict()


@router.put("/{cycle_id}")
async def update_cycle(cycle_id: int, form: CycleForm):
    """Replace a cycle's schedule and members.

    Members are recreated, so sessions of the previous members are removed.
    """
    repo = CycleRepository()
    if not await repo.get(cycle_id):
        return not_found("Cycle")
    await repo.update(_with_tips(form.to_cycle(cycle_id)))
    return (await repo.get(cycle_id)).to_dict()


@router.delete("/{cycle_id}")
async def delete_cycle(cycle_id: int):
    """Delete a cycle with its member workouts and their sessions."""
    if not await CycleRepository().delete(cycle_id):
        return not_found("Cycle")
    return {"status": "deleted", "id": cycle_id}
