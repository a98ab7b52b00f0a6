"""Month calendar command."""

from datetime import date

import click

from ..schedule.recurrence import WEEKDAY_NAMES, weekday_number
from ..services.planner import PlannerService
from .base import async_command, ensure_initialized

CELL_WIDTH = 6


def _cell(day) -> str:
    """Render a calendar day: number plus a marker.

    '*' means every due workout was completed, '+' means something was due.
    """
    marker = ""
    if day.all_completed:
        marker = "*"
    elif day.due:
        marker = "+"
    text = f"{day.day.day}{marker}"
    if not day.in_month:
        return click.style(text.rjust(CELL_WIDTH - 1), dim=True) + " "
    if day.day == date.today():
        return click.style(text.rjust(CELL_WIDTH - 1), bold=True, underline=True) + " "
    return text.rjust(CELL_WIDTH - 1) + " "


@click.command()
@click.option("--year", type=click.IntRange(1, 9999), default=None, help="Year (default: current)")
@click.option("--month", type=click.IntRange(1, 12), default=None, help="Month 1-12 (default: current)")
@click.option("--details", "-d", is_flag=True, help="List the due workouts of every day")
@click.pass_context
@async_command
async def calendar(ctx: click.Context, year: int | None, month: int | None, details: bool):
    """Show a month with scheduled and completed days.

    '+' marks days with workouts due, '*' days where all of them were done.
    """
    ensure_initialized(ctx)

    today = date.today()
    year = year or today.year
    month = month or today.month

    days = await PlannerService().calendar(year, month)

    click.echo()
    click.echo(click.style(f"{date(year, month, 1):%B %Y}", bold=True).center(CELL_WIDTH * 7))
    click.echo("".join(name.rjust(CELL_WIDTH - 1) + " " for name in WEEKDAY_NAMES))
    # Grids clipped at date.min start mid-week
    cells = [" " * CELL_WIDTH] * weekday_number(days[0].day) + [_cell(day) for day in days]
    for start in range(0, len(cells), 7):
        click.echo("".join(cells[start:start + 7]))

    if details:
        click.echo()
        for day in days:
            if not day.in_month or not day.due:
                continue
            done = {s.workout_id for s in day.sessions if s.completed}
            names = ", ".join(
                d.workout.name + (" (done)" if d.workout.id in done else "") for d in day.due
            )
            click.echo(f"  {day.day:%a %d}: {names}")
