"""Workout management commands."""

import click
from pydantic import ValidationError

from ..db import WorkoutRepository
from ..forms.questionnaire import WorkoutQuestionnaire
from ..forms.validation import CycleMemberForm, WorkoutForm
from ..models.workout import WorkoutType
from ..services.tips import suggest_tip
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_validation_error,
    echo_warning,
    ensure_initialized,
    format_table,
    parse_weekdays,
)

schedule_options = [
    click.option("--every", "interval_days", type=int, help="Repeat every N days"),
    click.option("--days", "weekdays", help="Weekdays, e.g. 'mon,wed,fri' or '1,3,5' (0=Sunday)"),
    click.option("--start", "start_date", type=click.DateTime(formats=["%Y-%m-%d"]), help="Start date (YYYY-MM-DD)"),
]


def with_schedule_options(f):
    for option in reversed(schedule_options):
        f = option(f)
    return f


@click.group()
@click.pass_context
def workouts(ctx):
    """Manage workouts.

    Commands for adding, editing, listing, reordering and deleting workouts.
    """
    ensure_initialized(ctx)


@workouts.command(name="list")
@click.option("--all", "show_all", is_flag=True, help="Include workouts that belong to cycles")
@click.pass_context
@async_command
async def list_workouts(ctx, show_all: bool):
    """List workouts in display order."""
    repo = WorkoutRepository()
    items = await repo.list_all() if show_all else await repo.list_standalone()

    if not items:
        echo_info("No workouts found. Add one with 'fitcycle workouts add'")
        return

    headers = ["ID", "Name", "Target", "Schedule", "Starts"]
    rows = []
    for workout in items:
        schedule = f"cycle {workout.cycle_id}" if workout.is_cycle_member else workout.rule.describe()
        rows.append([
            str(workout.id),
            workout.name[:30] + "..." if len(workout.name) > 30 else workout.name,
            workout.get_target_display(),
            schedule,
            "-" if workout.is_cycle_member else workout.rule.start_date.isoformat(),
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(items)} workout(s)")


@workouts.command()
@click.argument("workout_id", type=int)
@click.pass_context
@async_command
async def show(ctx, workout_id: int):
    """Show details of a workout."""
    repo = WorkoutRepository()
    workout = await repo.get(workout_id)
    if not workout:
        echo_error(f"Workout ID {workout_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo("=" * 50)
    click.echo(f"Workout: {workout.name} (ID: {workout.id})")
    click.echo("=" * 50)
    click.echo(f"Type: {workout.workout_type.value}")
    click.echo(f"Target: {workout.get_target_display()}")
    click.echo(f"Rest: {workout.rest_time}s")
    if workout.is_cycle_member:
        click.echo(f"Schedule: follows cycle {workout.cycle_id} (position {workout.cycle_order + 1})")
    else:
        click.echo(f"Schedule: {workout.rule.describe()} from {workout.rule.start_date}")
    if workout.notes:
        click.echo(f"Notes: {workout.notes}")
    if workout.ai_tip:
        click.echo()
        click.echo(click.style("Tip: ", bold=True) + workout.ai_tip)


@workouts.command()
@click.argument("name", required=False)
@click.option("--interactive", "-i", is_flag=True, help="Answer prompts instead of passing options")
@click.option("--type", "workout_type", type=click.Choice([t.value for t in WorkoutType]), default="weight", show_default=True)
@click.option("--target", type=float, default=0.0, help="Weight in kg, or minutes for time workouts")
@click.option("--sets", type=int, default=3, show_default=True)
@click.option("--reps", "reps_per_set", type=int, default=10, show_default=True)
@click.option("--rest", "rest_time", type=int, default=60, show_default=True, help="Rest in seconds")
@click.option("--notes", default=None)
@with_schedule_options
@click.pass_context
@async_command
async def add(ctx, name, interactive, workout_type, target, sets, reps_per_set, rest_time,
              notes, interval_days, weekdays, start_date):
    """Add a workout.

    Examples:

        fitcycle workouts add "Bench Press" --target 60 --days mon,thu

        fitcycle workouts add "Plank" --type time --target 2 --every 2
    """
    try:
        if interactive or not name:
            form = await WorkoutQuestionnaire().collect_workout()
        else:
            form = WorkoutForm(
                name=name,
                workout_type=workout_type,
                target=target,
                sets=sets,
                reps_per_set=reps_per_set,
                rest_time=rest_time,
                notes=notes,
                interval_days=interval_days,
                schedule_days=parse_weekdays(weekdays),
                **({"start_date": start_date.date()} if start_date else {}),
            )
    except ValidationError as e:
        echo_validation_error(e)
        ctx.exit(1)

    workout = form.to_workout()
    workout.ai_tip = suggest_tip(workout.name)
    workout_id = await WorkoutRepository().create(workout)
    echo_success(f"Workout '{workout.name}' added (ID: {workout_id}), {workout.rule.describe().lower()}")


@workouts.command()
@click.argument("workout_id", type=int)
@click.option("--name", default=None)
@click.option("--type", "workout_type", type=click.Choice([t.value for t in WorkoutType]), default=None)
@click.option("--target", type=float, default=None)
@click.option("--sets", type=int, default=None)
@click.option("--reps", "reps_per_set", type=int, default=None)
@click.option("--rest", "rest_time", type=int, default=None)
@click.option("--notes", default=None)
@with_schedule_options
@click.pass_context
@async_command
async def edit(ctx, workout_id, name, workout_type, target, sets, reps_per_set, rest_time,
               notes, interval_days, weekdays, start_date):
    """Edit a workout. Only the options given are changed.

    Passing --every clears weekdays and passing --days clears the interval.
    """
    repo = WorkoutRepository()
    workout = await repo.get(workout_id)
    if not workout:
        echo_error(f"Workout ID {workout_id} not found")
        ctx.exit(1)

    values = {
        "name": name or workout.name,
        "workout_type": workout_type or workout.workout_type,
        "target": workout.target if target is None else target,
        "sets": workout.sets if sets is None else sets,
        "reps_per_set": workout.reps_per_set if reps_per_set is None else reps_per_set,
        "rest_time": workout.rest_time if rest_time is None else rest_time,
        "notes": workout.notes if notes is None else notes,
    }
    schedule_given = interval_days is not None or weekdays is not None or start_date is not None
    old_name = workout.name

    try:
        if workout.is_cycle_member:
            if schedule_given:
                echo_warning("Cycle workouts follow the cycle's schedule; schedule options ignored")
            form_workout = CycleMemberForm(**values).to_workout()
            form_workout.rule = workout.rule
        else:
            schedule_days = sorted(workout.rule.schedule_days)
            current_interval = workout.rule.interval_days
            if weekdays is not None:
                schedule_days, current_interval = parse_weekdays(weekdays), None
            if interval_days is not None:
                schedule_days, current_interval = [], interval_days
            form_workout = WorkoutForm(
                **values,
                interval_days=current_interval,
                schedule_days=schedule_days,
                start_date=start_date.date() if start_date else workout.rule.start_date,
            ).to_workout()
    except ValidationError as e:
        echo_validation_error(e)
        ctx.exit(1)

    form_workout.id = workout.id
    form_workout.ai_tip = workout.ai_tip
    if form_workout.name != old_name:
        form_workout.ai_tip = suggest_tip(form_workout.name)

    await repo.update(form_workout)
    echo_success(f"Workout {workout_id} updated")


@workouts.command()
@click.argument("workout_ids", type=int, nargs=-1, required=True)
@click.pass_context
@async_command
async def reorder(ctx, workout_ids: tuple[int, ...]):
    """Set the display order: list workout IDs first to last."""
    updated = await WorkoutRepository().reorder(list(workout_ids))
    if updated < len(workout_ids):
        echo_warning(f"{len(workout_ids) - updated} unknown workout ID(s) skipped")
    echo_success(f"Reordered {updated} workout(s)")


@workouts.command()
@click.argument("workout_id", type=int)
@click.pass_context
@async_command
async def tip(ctx, workout_id: int):
    """Re-apply the tip table to a workout.

    Tips are picked by keyword from the workout name, so the result only
    changes when the name or the tip table has changed since it was stored.
    """
    repo = WorkoutRepository()
    workout = await repo.get(workout_id)
    if not workout:
        echo_error(f"Workout ID {workout_id} not found")
        ctx.exit(1)

    new_tip = suggest_tip(workout.name)
    await repo.set_tip(workout_id, new_tip)
    click.echo(new_tip)


@workouts.command()
@click.argument("workout_id", type=int)
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, workout_id: int, force: bool):
    """Delete a workout and its sessions."""
    repo = WorkoutRepository()
    workout = await repo.get(workout_id)
    if not workout:
        echo_error(f"Workout ID {workout_id} not found")
        ctx.exit(1)

    if not force:
        click.echo(f"Workout: {workout.name}")
        if not click.confirm("Are you sure you want to delete this workout?"):
            echo_info("Cancelled")
            return

    await repo.delete(workout_id)
    echo_success(f"Workout {workout_id} deleted")
