"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click
from pydantic import ValidationError

from ..db import get_db_path
from ..schedule.recurrence import WEEKDAY_NAMES


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Database not initialized. Run 'fitcycle init' first."
        )
        ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def echo_validation_error(error: ValidationError) -> None:
    """Print each problem of a form validation error."""
    for problem in error.errors():
        field = ".".join(str(part) for part in problem["loc"]) or "input"
        echo_error(f"{field}: {problem['msg']}")


def parse_weekdays(value: str | None) -> list[int]:
    """Parse a weekday list such as 'mon,wed,fri' or '1,3,5' (0=Sunday)."""
    if not value:
        return []
    names = [name.lower() for name in WEEKDAY_NAMES]
    days = []
    for item in value.split(","):
        item = item.strip().lower()
        if not item:
            continue
        if item.isdigit():
            days.append(int(item))
        elif item[:3] in names:
            days.append(names.index(item[:3]))
        else:
            raise click.BadParameter(f"Unknown weekday '{item}'")
    return days


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = [
        "".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip(),
        "".join("-" * w + " " * padding for w in widths).rstrip(),
    ]
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip()
        )

    return "\n".join(lines)
