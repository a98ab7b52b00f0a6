"""Interactive prompts for creating workouts and cycles."""

from datetime import date

import click
import questionary
from questionary import Style

from ..models.workout import WorkoutType
from ..schedule.recurrence import WEEKDAY_NAMES
from .validation import CycleForm, CycleMemberForm, WorkoutForm

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def _parse_int(value: str | None, default: int) -> int:
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def _parse_float(value: str | None, default: float) -> float:
    try:
        return float(value)
    except (ValueError, TypeError):
        return default


class WorkoutQuestionnaire:
    """Collects workout and cycle definitions from the terminal."""

    async def collect_workout(self) -> WorkoutForm:
        """Ask for a standalone workout and its schedule."""
        click.echo("\n=== New Workout ===\n")
        details = await self._collect_details()
        schedule = await self._collect_schedule()
        return WorkoutForm(**details, **schedule)

    async def collect_cycle(self) -> CycleForm:
        """Ask for a cycle: name, schedule, then workouts in rotation order."""
        click.echo("\n=== New Cycle ===\n")
        name = await questionary.text(
            "Cycle name:",
            style=custom_style,
        ).ask_async()
        schedule = await self._collect_schedule()

        click.echo("\nAdd the workouts in the order they should rotate.\n")
        members: list[CycleMemberForm] = []
        add_more = True
        while add_more:
            members.append(CycleMemberForm(**await self._collect_details()))
            add_more = await questionary.confirm(
                "Add another workout to this cycle?",
                default=len(members) < 2,
                style=custom_style,
            ).ask_async()

        return CycleForm(name=name or "Cycle", workouts=members, **schedule)

    async def _collect_details(self) -> dict:
        name = await questionary.text(
            "Workout name:",
            validate=lambda text: bool(text.strip()) or "Name is required",
            style=custom_style,
        ).ask_async()

        workout_type = await questionary.select(
            "How is it measured?",
            choices=[
                questionary.Choice("Weight (kg)", WorkoutType.WEIGHT),
                questionary.Choice("Time (minutes)", WorkoutType.TIME),
            ],
            style=custom_style,
        ).ask_async()

        unit = "minutes" if workout_type == WorkoutType.TIME else "kg"
        target = await questionary.text(
            f"Target ({unit}):",
            default="0",
            style=custom_style,
        ).ask_async()
        sets = await questionary.text("Sets:", default="3", style=custom_style).ask_async()

        reps = "1"
        if workout_type == WorkoutType.WEIGHT:
            reps = await questionary.text(
                "Reps per set:", default="10", style=custom_style
            ).ask_async()

        rest = await questionary.text(
            "Rest between sets (seconds):", default="60", style=custom_style
        ).ask_async()
        notes = await questionary.text(
            "Notes (optional):", default="", style=custom_style
        ).ask_async()

        return {
            "name": name,
            "workout_type": workout_type,
            "target": _parse_float(target, 0.0),
            "sets": _parse_int(sets, 3),
            "reps_per_set": _parse_int(reps, 10),
            "rest_time": _parse_int(rest, 60),
            "notes": notes or None,
        }

    async def _collect_schedule(self) -> dict:
        mode = await questionary.select(
            "How should it repeat?",
            choices=[
                questionary.Choice("On specific weekdays", "weekdays"),
                questionary.Choice("Every N days", "interval"),
            ],
            style=custom_style,
        ).ask_async()

        interval_days = None
        schedule_days: list[int] = []
        if mode == "weekdays":
            schedule_days = await questionary.checkbox(
                "Which days?",
                choices=[
                    questionary.Choice(name, number)
                    for number, name in enumerate(WEEKDAY_NAMES)
                ],
                validate=lambda chosen: bool(chosen) or "Pick at least one day",
                style=custom_style,
            ).ask_async()
        else:
            interval = await questionary.text(
                "Repeat every how many days?", default="2", style=custom_style
            ).ask_async()
            interval_days = _parse_int(interval, 2)

        start = await questionary.text(
            "Start date (YYYY-MM-DD):",
            default=date.today().isoformat(),
            style=custom_style,
        ).ask_async()
        try:
            start_date = date.fromisoformat(start)
        except (ValueError, TypeError):
            start_date = date.today()

        return {
            "interval_days": interval_days,
            "schedule_days": schedule_days or [],
            "start_date": start_date,
        }
