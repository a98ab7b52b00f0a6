"""CLI entry point for fitcycle."""

import click

from .commands import calendar, cycles, init, report, serve, sessions, stats, today, workouts
from .config import get_settings
from .logger import setup_logger


@click.group()
@click.version_option(version="0.1.0", prog_name="fitcycle")
@click.option("--log-level", default=None, help="Override FITCYCLE_LOG_LEVEL")
def main(log_level: str | None):
    """fitcycle: schedule workouts, rotate cycles and log sessions.

    Workouts repeat every N days or on chosen weekdays. Cycles rotate
    through their workouts one scheduled day at a time.

    Example usage:

        # Initialize the database
        fitcycle init

        # Add a workout on Mondays and Thursdays
        fitcycle workouts add "Bench Press" --target 60 --days mon,thu

        # Rotate three workouts every other day
        fitcycle cycles add "PPL" -w Push -w Pull -w Legs --every 2

        # See and start what is due today
        fitcycle today --start
    """
    settings = get_settings()
    setup_logger(level=(log_level or settings.log_level).upper(), log_file=settings.log_file)


# Register commands
main.add_command(init)
main.add_command(workouts)
main.add_command(cycles)
main.add_command(today)
main.add_command(sessions)
main.add_command(calendar)
main.add_command(stats)
main.add_command(report)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
