"""Session logging commands."""

from datetime import date, timedelta

import click
from pydantic import ValidationError

from ..db import SessionRepository, WorkoutRepository
from ..forms.validation import SessionUpdateForm
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_validation_error,
    ensure_initialized,
    format_table,
)


@click.group()
@click.pass_context
def sessions(ctx):
    """Log and review workout sessions."""
    ensure_initialized(ctx)


@sessions.command(name="list")
@click.option("--days", default=14, show_default=True, help="How many days back to list")
@click.pass_context
@async_command
async def list_sessions(ctx, days: int):
    """List recent sessions, newest first."""
    end = date.today()
    items = await SessionRepository().list_between(end - timedelta(days=days), end)

    if not items:
        echo_info("No sessions in this period")
        return

    headers = ["ID", "Date", "Workout", "Status", "Sets", "Reps", "Weight"]
    rows = [
        [
            str(s.id),
            s.date.isoformat(),
            s.workout.name if s.workout else str(s.workout_id),
            s.get_status_display(),
            str(s.sets_completed),
            "/".join(str(r) for r in s.reps_per_set) or "-",
            f"{s.weight_used:g}" if s.weight_used is not None else "-",
        ]
        for s in items
    ]
    click.echo()
    click.echo(format_table(headers, rows))


@sessions.command()
@click.argument("workout_id", type=int)
@click.option("--date", "day", type=click.DateTime(formats=["%Y-%m-%d"]), help="Session date (default: today)")
@click.option("--sets", "sets_completed", type=int, default=None, help="Sets completed")
@click.option("--reps", default=None, help="Reps per set, e.g. '10,10,8'")
@click.option("--weight", "weight_used", type=float, default=None, help="Weight used in kg")
@click.option("--duration", type=int, default=None, help="Duration in seconds")
@click.option("--done", "completed", is_flag=True, help="Mark the session completed")
@click.pass_context
@async_command
async def log(ctx, workout_id, day, sets_completed, reps, weight_used, duration, completed):
    """Start (or update) the session of a workout on a day."""
    workout = await WorkoutRepository().get(workout_id)
    if not workout:
        echo_error(f"Workout ID {workout_id} not found")
        ctx.exit(1)

    try:
        reps_per_set = [int(r) for r in reps.split(",") if r.strip()] if reps else None
    except ValueError:
        echo_error(f"Invalid reps '{reps}'")
        ctx.exit(1)

    try:
        form = SessionUpdateForm(
            completed=True if completed else None,
            sets_completed=sets_completed,
            reps_per_set=reps_per_set,
            weight_used=weight_used,
            duration=duration,
        )
    except ValidationError as e:
        echo_validation_error(e)
        ctx.exit(1)

    repo = SessionRepository()
    session = await repo.start(workout, day.date() if day else date.today())
    session = await repo.update(session.id, form.model_dump(exclude_none=True))
    echo_success(
        f"Session {session.id}: {workout.name} on {session.date} ({session.get_status_display()})"
    )


@sessions.command()
@click.argument("session_id", type=int)
@click.pass_context
@async_command
async def delete(ctx, session_id: int):
    """Delete a session."""
    if not await SessionRepository().delete(session_id):
        echo_error(f"Session ID {session_id} not found")
        ctx.exit(1)
    echo_success(f"Session {session_id} deleted")
