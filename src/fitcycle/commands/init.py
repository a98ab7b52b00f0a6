"""Initialize database command."""

import click

from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the fitcycle database.

    Creates the data directory and the SQLite schema. Safe to run again
    on an existing database.
    """
    db_path = get_db_path()

    echo_info(f"Initializing fitcycle in {db_path.parent}")
    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Add a workout:")
    click.echo('     fitcycle workouts add "Bench Press" --target 60 --days mon,thu')
    click.echo("     fitcycle workouts add -i          # Interactive")
    click.echo()
    click.echo("  2. See what is due today:")
    click.echo("     fitcycle today --start")
