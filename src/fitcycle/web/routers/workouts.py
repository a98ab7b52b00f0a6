"""Workout routes."""

from fastapi import APIRouter

from ...db.repositories import WorkoutRepository
from ...forms.validation import ReorderForm, WorkoutForm
from ...services.tips import suggest_tip
from .common import bad_request, not_found

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.get("")
async def list_workouts():
    """All workouts in display order, cycle members included."""
    workouts = await WorkoutRepository().list_all()
    return [w.to_dict() for w in workouts]


@router.post("", status_code=201)
async def create_workout(form: WorkoutForm):
    """Create a standalone workout with its own schedule."""
    repo = WorkoutRepository()
    workout = form.to_workout()
    workout.ai_tip = suggest_tip(workout.name)
    workout_id = await repo.create(workout)
    return (await repo.get(workout_id)).to_dict()


@router.put("/reorder")
async def reorder_workouts(form: ReorderForm):
    """Set display order from the position of each ID."""
    updated = await WorkoutRepository().reorder(form.workout_ids)
    return {"status": "reordered", "updated": updated}


@router.get("/{workout_id}")
async def get_workout(workout_id: int):
    workout = await WorkoutRepository().get(workout_id)
    if not workout:
        return not_found("Workout")
    return workout.to_dict()


@router.put("/{workout_id}")
async def update_workout(workout_id: int, form: WorkoutForm):
    """Replace a standalone workout's details and schedule.

    Cycle members are scheduled by their cycle; update them through
    ``PUT /cycles/{id}``.
    """
    repo = WorkoutRepository()
    workout = await repo.get(workout_id)
    if not workout:
        return not_found("Workout")
    if workout.is_cycle_member:
        return bad_request("Workout belongs to a cycle; edit the cycle instead")

    renamed = workout.name != form.name
    form.apply_to(workout)
    if renamed or not workout.ai_tip:
        workout.ai_tip = suggest_tip(workout.name)
    await repo.update(workout)
    return (await repo.get(workout_id)).to_dict()


@router.post("/{workout_id}/regenerate-tip")
async def regenerate_tip(workout_id: int):
    """Re-apply the keyword tip table to the workout.

    The tip is a pure function of the name; this resets a stale or
    cleared tip and returns the same tip again otherwise.
    """
    repo = WorkoutRepository()
    workout = await repo.get(workout_id)
    if not workout:
        return not_found("Workout")
    tip = suggest_tip(workout.name)
    await repo.set_tip(workout_id, tip)
    return {"id": workout_id, "ai_tip": tip}


@router.delete("/{workout_id}")
async def delete_workout(workout_id: int):
    """Delete a workout together with its sessions."""
    if not await WorkoutRepository().delete(workout_id):
        return not_found("Workout")
    return {"status": "deleted", "id": workout_id}
