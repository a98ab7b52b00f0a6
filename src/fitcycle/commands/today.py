"""Today's workouts command."""

import click

from ..services.planner import PlannerService
from .base import async_command, echo_info, echo_success, ensure_initialized


@click.command()
@click.option("--date", "day", type=click.DateTime(formats=["%Y-%m-%d"]), help="Show another day (YYYY-MM-DD)")
@click.option("--start", "start_sessions", is_flag=True, help="Start sessions for every due workout")
@click.pass_context
@async_command
async def today(ctx: click.Context, day, start_sessions: bool):
    """Show the workouts due today and their sessions.

    Standalone workouts appear when their own schedule is due; each cycle
    contributes the workout whose turn it is.
    """
    ensure_initialized(ctx)

    planner = PlannerService()
    plan = await planner.today(day.date() if day else None)

    if start_sessions and plan.missing:
        started = await planner.start_missing(plan.day)
        echo_success(f"Started {len(started)} session(s)")
        plan = await planner.today(plan.day)

    click.echo()
    click.echo(click.style(f"{plan.day:%A, %B} {plan.day.day}", bold=True))
    click.echo("=" * 50)

    if not plan.due:
        echo_info("No workouts scheduled for this day")
    else:
        sessions = {s.workout_id: s for s in plan.sessions}
        for due in plan.due:
            workout = due.workout
            source = f" [{due.cycle.name}]" if due.cycle else ""
            session = sessions.get(workout.id)
            if session is None:
                status = click.style("not started", fg="yellow")
            elif session.completed:
                status = click.style("done", fg="green")
            else:
                status = click.style(session.get_status_display().lower(), fg="blue")
            click.echo(f"  {workout.name}{source}: {workout.get_target_display()} ({status})")
            if session is not None:
                click.echo(f"      session {session.id}")

    extra = [s for s in plan.sessions if s.workout_id not in {d.workout.id for d in plan.due}]
    if extra:
        click.echo()
        click.echo(click.style("Also logged:", bold=True))
        for session in extra:
            name = session.workout.name if session.workout else f"workout {session.workout_id}"
            click.echo(f"  {name}: {session.get_status_display()} (session {session.id})")

    if plan.missing and not start_sessions:
        click.echo()
        click.echo("Run 'fitcycle today --start' to start sessions for due workouts.")
