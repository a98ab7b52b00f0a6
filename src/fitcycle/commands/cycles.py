"""Workout cycle commands."""

import json
from datetime import date, timedelta

import click
from pydantic import ValidationError

from ..db import CycleRepository
from ..forms.questionnaire import WorkoutQuestionnaire
from ..forms.validation import CycleForm
from ..schedule.recurrence import cycle_workout_for, occurrences_up_to
from ..services.tips import suggest_tip
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_validation_error,
    ensure_initialized,
    format_table,
    parse_weekdays,
)
from .workouts import with_schedule_options


@click.group()
@click.pass_context
def cycles(ctx):
    """Manage workout cycles.

    A cycle rotates through its workouts, one per scheduled day, in order.
    """
    ensure_initialized(ctx)


@cycles.command(name="list")
@click.pass_context
@async_command
async def list_cycles(ctx):
    """List all cycles."""
    all_cycles = await CycleRepository().list_all()

    if not all_cycles:
        echo_info("No cycles found. Create one with 'fitcycle cycles add'")
        return

    headers = ["ID", "Name", "Workouts", "Schedule", "Starts"]
    rows = [
        [
            str(cycle.id),
            cycle.name,
            " > ".join(w.name for w in cycle.workouts),
            cycle.rule.describe(),
            cycle.rule.start_date.isoformat(),
        ]
        for cycle in all_cycles
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_cycles)} cycle(s)")


@cycles.command()
@click.argument("cycle_id", type=int)
@click.option("--upcoming", "-u", default=7, show_default=True, help="Number of upcoming days to preview")
@click.pass_context
@async_command
async def show(ctx, cycle_id: int, upcoming: int):
    """Show a cycle, its rotation and the next scheduled days."""
    cycle = await CycleRepository().get(cycle_id)
    if not cycle:
        echo_error(f"Cycle ID {cycle_id} not found")
        ctx.exit(1)

    today = date.today()
    click.echo()
    click.echo("=" * 50)
    click.echo(f"Cycle: {cycle.name} (ID: {cycle.id})")
    click.echo("=" * 50)
    click.echo(f"Schedule: {cycle.rule.describe()} from {cycle.rule.start_date}")
    click.echo(f"Occurrences so far: {len(occurrences_up_to(cycle.rule, today))}")
    click.echo()
    click.echo(click.style("Rotation:", bold=True))
    for index, workout in enumerate(cycle.workouts, start=1):
        click.echo(f"  {index}. {workout.name} ({workout.get_target_display()})")

    click.echo()
    click.echo(click.style("Upcoming:", bold=True))
    for offset in range(upcoming):
        day = today + timedelta(days=offset)
        workout = cycle_workout_for(cycle.rule, day, cycle.workouts)
        if workout:
            click.echo(f"  {day:%a %Y-%m-%d}: {workout.name}")


@cycles.command()
@click.argument("name", required=False)
@click.option("--interactive", "-i", is_flag=True, help="Answer prompts instead of passing options")
@click.option(
    "--workouts", "workouts_json",
    help='JSON list of workouts, e.g. \'[{"name": "Push", "target": 40}, {"name": "Pull"}]\'',
)
@click.option("--workout", "-w", "workout_names", multiple=True, help="Workout name (repeat, in rotation order)")
@with_schedule_options
@click.pass_context
@async_command
async def add(ctx, name, interactive, workouts_json, workout_names, interval_days, weekdays, start_date):
    """Create a cycle.

    Examples:

        fitcycle cycles add "Push Pull Legs" -w Push -w Pull -w Legs --every 2

        fitcycle cycles add -i
    """
    try:
        if interactive or not name:
            form = await WorkoutQuestionnaire().collect_cycle()
        else:
            members = [{"name": n} for n in workout_names]
            if workouts_json:
                try:
                    extra = json.loads(workouts_json)
                except json.JSONDecodeError as e:
                    raise click.BadParameter(f"Invalid JSON: {e}", param_hint="--workouts")
                if not isinstance(extra, list):
                    raise click.BadParameter("Expected a JSON list", param_hint="--workouts")
                members += extra
            form = CycleForm(
                name=name,
                workouts=members,
                interval_days=interval_days,
                schedule_days=parse_weekdays(weekdays),
                **({"start_date": start_date.date()} if start_date else {}),
            )
    except ValidationError as e:
        echo_validation_error(e)
        ctx.exit(1)

    cycle = form.to_cycle()
    for workout in cycle.workouts:
        workout.ai_tip = suggest_tip(workout.name)
    cycle_id = await CycleRepository().create(cycle)
    echo_success(f"Cycle '{cycle.name}' created (ID: {cycle_id}) with {len(cycle.workouts)} workout(s)")


@cycles.command()
@click.argument("cycle_id", type=int)
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, cycle_id: int, force: bool):
    """Delete a cycle together with its workouts and their sessions."""
    repo = CycleRepository()
    cycle = await repo.get(cycle_id)
    if not cycle:
        echo_error(f"Cycle ID {cycle_id} not found")
        ctx.exit(1)

    if not force:
        click.echo(f"Cycle: {cycle.name} ({len(cycle.workouts)} workouts)")
        if not click.confirm("Are you sure you want to delete this cycle?"):
            echo_info("Cancelled")
            return

    await repo.delete(cycle_id)
    echo_success(f"Cycle {cycle_id} deleted")
