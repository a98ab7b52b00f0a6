"""Recurrence rules and the schedule resolver.

A rule either repeats every N days from its start date or on a fixed set of
weekdays. Everything here is a pure function of its arguments: no counters,
no storage, no clock. Malformed input never raises; it simply never matches.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Sequence, TypeVar

T = TypeVar("T")

# Weekday numbering used throughout: 0 = Sunday ... 6 = Saturday
SUNDAY = 0
SATURDAY = 6
WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


@dataclass(frozen=True)
class RecurrenceRule:
    """When a workout (or cycle) is due.

    A non-empty ``schedule_days`` takes precedence over ``interval_days``.
    With neither set the rule never matches.
    """

    start_date: date
    interval_days: int | None = None
    schedule_days: frozenset[int] = field(default_factory=frozenset)

    @property
    def is_weekly(self) -> bool:
        """True if the rule is driven by weekdays."""
        return bool(self.schedule_days)

    def describe(self) -> str:
        """Get a human-readable description of the rule."""
        if self.schedule_days:
            days = ", ".join(
                WEEKDAY_NAMES[d] for d in sorted(self.schedule_days) if _valid_weekday(d)
            )
            return f"Every {days}" if days else "Not scheduled"
        if _valid_interval(self.interval_days):
            if self.interval_days == 1:
                return "Every day"
            return f"Every {self.interval_days} days"
        return "Not scheduled"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "interval_days": self.interval_days,
            "schedule_days": sorted(self.schedule_days),
            "start_date": self.start_date.isoformat() if isinstance(self.start_date, date) else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RecurrenceRule":
        """Create from dictionary."""
        start = data.get("start_date")
        if isinstance(start, str):
            start = date.fromisoformat(start[:10])
        return cls(
            start_date=start,
            interval_days=data.get("interval_days"),
            schedule_days=frozenset(data.get("schedule_days") or []),
        )


def to_day(value: date | datetime | None) -> date | None:
    """Truncate a date or datetime to its calendar day.

    Returns None for anything that is not a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def weekday_number(day: date) -> int:
    """Weekday of ``day`` with Sunday as 0."""
    return (day.weekday() + 1) % 7


def _valid_interval(interval: object) -> bool:
    return isinstance(interval, int) and not isinstance(interval, bool) and interval > 0


def _valid_weekday(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and SUNDAY <= value <= SATURDAY


def is_scheduled_on(rule: RecurrenceRule, day: date | datetime) -> bool:
    """Check whether ``rule`` has an occurrence on ``day``.

    Args:
        rule: The recurrence rule
        day: Target date; any time of day is discarded

    Returns:
        True if the rule is due on that calendar day
    """
    target = to_day(day)
    start = to_day(getattr(rule, "start_date", None))
    if target is None or start is None:
        return False

    if target < start:
        return False

    if rule.schedule_days:
        return weekday_number(target) in rule.schedule_days

    if _valid_interval(rule.interval_days):
        # date subtraction counts calendar days, so DST shifts cannot skew it
        days_since_start = (target - start).days
        return days_since_start % rule.interval_days == 0

    return False


def occurrences_up_to(rule: RecurrenceRule, end: date | datetime) -> list[date]:
    """List every occurrence of ``rule`` from its start date through ``end``.

    The bound is inclusive. An ``end`` before the start date yields an
    empty list.
    """
    last = to_day(end)
    start = to_day(getattr(rule, "start_date", None))
    if last is None or start is None or last < start:
        return []

    occurrences = []
    # Offsets from start so the scan never steps past date.max
    for offset in range((last - start).days + 1):
        day = start + timedelta(days=offset)
        if is_scheduled_on(rule, day):
            occurrences.append(day)
    return occurrences


def cycle_workout_index_for(
    rule: RecurrenceRule, day: date | datetime, member_count: int
) -> int:
    """Get the index of the cycle member due on ``day``.

    Members rotate round-robin over the cycle's occurrences: the first
    occurrence maps to member 0, the second to member 1, and so on.
    The position is recounted from the start date on every call.

    Returns:
        0-based member index, or -1 if nothing is due
    """
    if not isinstance(member_count, int) or member_count <= 0:
        return -1

    if not is_scheduled_on(rule, day):
        return -1

    count = len(occurrences_up_to(rule, day))
    if count == 0:
        return -1

    return (count - 1) % member_count


def cycle_workout_for(
    rule: RecurrenceRule, day: date | datetime, members: Sequence[T]
) -> T | None:
    """Get the cycle member due on ``day``, or None."""
    index = cycle_workout_index_for(rule, day, len(members))
    if index < 0:
        return None
    return members[index]
