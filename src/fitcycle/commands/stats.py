"""Statistics and weekly report commands."""

from datetime import date

import click

from ..services.planner import PlannerService
from .base import async_command, ensure_initialized, format_table


@click.command()
@click.option("--progress", "-p", is_flag=True, help="Show weight progress per workout")
@click.pass_context
@async_command
async def stats(ctx: click.Context, progress: bool):
    """Show completion rate, totals and monthly activity.

    The completion rate compares completed sessions with every day a
    workout or cycle was scheduled up to today.
    """
    ensure_initialized(ctx)

    result = await PlannerService().stats()

    click.echo()
    click.echo(click.style("Training Stats", bold=True))
    click.echo("=" * 50)
    click.echo(f"Completed:       {result.total_completed}")
    click.echo(f"Scheduled:       {result.total_scheduled}")
    click.echo(f"Completion rate: {result.completion_rate}%")
    click.echo(f"Total sets:      {result.total_sets}")
    click.echo(f"Total reps:      {result.total_reps}")
    click.echo(f"Workouts:        {result.total_workouts}")

    click.echo()
    click.echo(click.style("Monthly:", bold=True))
    rows = [[m.month, str(m.total), str(m.completed)] for m in result.monthly_stats]
    click.echo(format_table(["Month", "Sessions", "Completed"], rows))

    if progress:
        click.echo()
        click.echo(click.style("Progress:", bold=True))
        for series in result.weight_progress:
            if not series.data:
                continue
            values = " > ".join(f"{p.weight:g}" for p in series.data)
            click.echo(f"  {series.workout_name}: {values}")


@click.command()
@click.option("--date", "day", type=click.DateTime(formats=["%Y-%m-%d"]), help="Any day of the week to report")
@click.pass_context
@async_command
async def report(ctx: click.Context, day):
    """Print the weekly report (Monday to Sunday) against the previous week."""
    ensure_initialized(ctx)

    weekly = await PlannerService().weekly_report(day.date() if day else date.today())

    click.echo()
    click.echo(click.style(f"Week of {weekly.week_start:%b} {weekly.week_start.day}", bold=True))
    click.echo("=" * 50)
    change = weekly.change
    trend = click.style(f"+{change}", fg="green") if change > 0 else (
        click.style(str(change), fg="red") if change < 0 else "no change"
    )
    click.echo(f"Workouts completed: {weekly.completed} ({trend} vs last week)")
    click.echo(f"Sets: {weekly.total_sets}   Reps: {weekly.total_reps}")
    click.echo(f"Weight lifted: {weekly.total_weight_lifted:,.0f} kg")
    if weekly.workouts_trained:
        click.echo(f"Trained: {', '.join(weekly.workouts_trained)}")
