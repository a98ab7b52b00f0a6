"""Tests for the schedule resolver."""

from datetime import date, datetime, timedelta

import pytest

from fitcycle.schedule.recurrence import (
    RecurrenceRule,
    cycle_workout_for,
    cycle_workout_index_for,
    is_scheduled_on,
    occurrences_up_to,
    to_day,
    weekday_number,
)

# 2024-01-01 is a Monday
START = date(2024, 1, 1)


def every(days: int, start: date = START) -> RecurrenceRule:
    return RecurrenceRule(start_date=start, interval_days=days)


def on(*weekdays: int, start: date = START) -> RecurrenceRule:
    return RecurrenceRule(start_date=start, schedule_days=frozenset(weekdays))


class TestWeekdayNumber:
    """Tests for Sunday-based weekday numbers."""

    def test_sunday_is_zero(self):
        assert weekday_number(date(2024, 1, 7)) == 0

    def test_monday_is_one(self):
        assert weekday_number(START) == 1

    def test_saturday_is_six(self):
        assert weekday_number(date(2024, 1, 6)) == 6

    def test_to_day_truncates_datetime(self):
        assert to_day(datetime(2024, 1, 4, 23, 59)) == date(2024, 1, 4)
        assert to_day("2024-01-04") is None


class TestIsScheduledOn:
    """Tests for is_scheduled_on."""

    def test_interval_hits_every_third_day(self):
        """Every 3 days from Jan 1 hits Jan 1, 4 and 7."""
        rule = every(3)
        assert is_scheduled_on(rule, date(2024, 1, 1))
        assert is_scheduled_on(rule, date(2024, 1, 4))
        assert is_scheduled_on(rule, date(2024, 1, 7))
        assert not is_scheduled_on(rule, date(2024, 1, 2))
        assert not is_scheduled_on(rule, date(2024, 1, 3))

    def test_start_date_is_always_an_interval_occurrence(self):
        for interval in (1, 2, 5, 30):
            assert is_scheduled_on(every(interval), START)

    def test_never_scheduled_before_start(self):
        assert not is_scheduled_on(every(1), date(2023, 12, 31))
        assert not is_scheduled_on(every(3), date(2023, 12, 29))
        assert not is_scheduled_on(on(0, 1, 2, 3, 4, 5, 6), date(2023, 12, 31))

    def test_weekdays(self):
        """Mon/Wed/Fri matches exactly those days."""
        rule = on(1, 3, 5)
        week = [START + timedelta(days=i) for i in range(7)]
        assert [is_scheduled_on(rule, d) for d in week] == [
            True, False, True, False, True, False, False,
        ]

    def test_weekdays_take_precedence_over_interval(self):
        """A rule with both set follows the weekdays only."""
        rule = RecurrenceRule(start_date=START, interval_days=1, schedule_days=frozenset({0}))
        assert not is_scheduled_on(rule, date(2024, 1, 2))
        assert is_scheduled_on(rule, date(2024, 1, 7))

    def test_time_of_day_is_ignored(self):
        rule = every(3)
        assert is_scheduled_on(rule, datetime(2024, 1, 4, 23, 59))
        assert is_scheduled_on(rule, datetime(2024, 1, 4, 0, 0))

    def test_start_time_of_day_is_ignored(self):
        rule = RecurrenceRule(start_date=datetime(2024, 1, 1, 18, 30), interval_days=2)
        assert is_scheduled_on(rule, date(2024, 1, 1))
        assert is_scheduled_on(rule, date(2024, 1, 3))

    @pytest.mark.parametrize("interval", [0, -3, None, True])
    def test_degenerate_interval_never_matches(self, interval):
        rule = RecurrenceRule(start_date=START, interval_days=interval)
        assert not any(is_scheduled_on(rule, START + timedelta(days=i)) for i in range(10))

    def test_out_of_range_weekdays_never_match(self):
        rule = on(7, -1)
        assert not any(is_scheduled_on(rule, START + timedelta(days=i)) for i in range(14))

    def test_missing_start_date_never_matches(self):
        rule = RecurrenceRule(start_date=None, interval_days=1)
        assert not is_scheduled_on(rule, START)

    def test_invalid_day_never_matches(self):
        assert not is_scheduled_on(every(1), None)

    def test_calendar_days_across_dst_change(self):
        """Daily rule stays daily across the March clock change."""
        rule = every(1, start=date(2024, 3, 9))
        assert is_scheduled_on(rule, date(2024, 3, 10))
        assert is_scheduled_on(rule, date(2024, 3, 11))

    def test_weekly_interval_across_leap_day(self):
        rule = every(7, start=date(2024, 2, 26))
        assert is_scheduled_on(rule, date(2024, 3, 4))
        assert not is_scheduled_on(rule, date(2024, 3, 5))


class TestOccurrencesUpTo:
    """Tests for occurrences_up_to."""

    def test_weekly_interval_inclusive_end(self):
        """Every 7 days up to Jan 22 gives four dates, the end included."""
        assert occurrences_up_to(every(7), date(2024, 1, 22)) == [
            date(2024, 1, 1),
            date(2024, 1, 8),
            date(2024, 1, 15),
            date(2024, 1, 22),
        ]

    def test_end_on_start_date(self):
        assert occurrences_up_to(every(3), START) == [START]

    def test_end_before_start_is_empty(self):
        assert occurrences_up_to(every(1), date(2023, 12, 31)) == []

    def test_weekdays(self):
        assert occurrences_up_to(on(1, 3, 5), date(2024, 1, 8)) == [
            date(2024, 1, 1),
            date(2024, 1, 3),
            date(2024, 1, 5),
            date(2024, 1, 8),
        ]

    def test_every_date_is_scheduled(self):
        rule = on(2, 6)
        result = occurrences_up_to(rule, date(2024, 3, 1))
        assert result
        assert all(is_scheduled_on(rule, d) for d in result)
        assert result == sorted(result)

    def test_daily_across_dst_month(self):
        assert len(occurrences_up_to(every(1, start=date(2024, 3, 1)), date(2024, 3, 31))) == 31

    def test_daily_across_leap_day(self):
        rule = every(1, start=date(2024, 2, 28))
        assert occurrences_up_to(rule, date(2024, 3, 1)) == [
            date(2024, 2, 28),
            date(2024, 2, 29),
            date(2024, 3, 1),
        ]

    def test_degenerate_rule_is_empty(self):
        assert occurrences_up_to(every(0), date(2024, 2, 1)) == []
        assert occurrences_up_to(RecurrenceRule(start_date=START), date(2024, 2, 1)) == []

    def test_datetime_end(self):
        assert occurrences_up_to(every(7), datetime(2024, 1, 8, 6, 0))[-1] == date(2024, 1, 8)


class TestCycleRotation:
    """Tests for cycle_workout_index_for and cycle_workout_for."""

    def test_two_members_daily_alternate(self):
        rule = every(1)
        assert cycle_workout_index_for(rule, date(2024, 1, 1), 2) == 0
        assert cycle_workout_index_for(rule, date(2024, 1, 2), 2) == 1
        assert cycle_workout_index_for(rule, date(2024, 1, 3), 2) == 0

    def test_three_members_every_other_day(self):
        rule = every(2)
        days = [date(2024, 1, d) for d in (1, 3, 5, 7, 9)]
        assert [cycle_workout_index_for(rule, d, 3) for d in days] == [0, 1, 2, 0, 1]

    def test_weekday_cycle_rotates_over_occurrences(self):
        rule = on(1, 4)  # Mon, Thu
        assert cycle_workout_index_for(rule, date(2024, 1, 1), 2) == 0
        assert cycle_workout_index_for(rule, date(2024, 1, 4), 2) == 1
        assert cycle_workout_index_for(rule, date(2024, 1, 8), 2) == 0

    def test_unscheduled_day_is_minus_one(self):
        assert cycle_workout_index_for(every(2), date(2024, 1, 2), 3) == -1

    def test_before_start_is_minus_one(self):
        assert cycle_workout_index_for(every(1), date(2023, 12, 31), 3) == -1

    @pytest.mark.parametrize("count", [0, -1])
    def test_no_members_is_minus_one(self, count):
        assert cycle_workout_index_for(every(1), START, count) == -1

    def test_index_in_range_on_scheduled_days(self):
        rule = on(0, 2, 4)
        for offset in range(60):
            day = START + timedelta(days=offset)
            index = cycle_workout_index_for(rule, day, 4)
            if is_scheduled_on(rule, day):
                assert 0 <= index < 4
            else:
                assert index == -1

    def test_single_member_always_first(self):
        rule = every(3)
        for day in occurrences_up_to(rule, date(2024, 2, 1)):
            assert cycle_workout_index_for(rule, day, 1) == 0

    def test_repeated_calls_agree(self):
        rule = every(2)
        day = date(2024, 1, 9)
        assert cycle_workout_index_for(rule, day, 3) == cycle_workout_index_for(rule, day, 3)

    def test_cycle_workout_for_returns_member(self):
        members = ["Push", "Pull", "Legs"]
        rule = every(1)
        assert cycle_workout_for(rule, date(2024, 1, 1), members) == "Push"
        assert cycle_workout_for(rule, date(2024, 1, 3), members) == "Legs"
        assert cycle_workout_for(rule, date(2024, 1, 4), members) == "Push"

    def test_cycle_workout_for_none_when_not_due(self):
        assert cycle_workout_for(every(2), date(2024, 1, 2), ["A", "B"]) is None
        assert cycle_workout_for(every(1), START, []) is None


class TestRecurrenceRule:
    """Tests for the RecurrenceRule value."""

    def test_describe(self):
        assert on(1, 3, 5).describe() == "Every Mon, Wed, Fri"
        assert every(1).describe() == "Every day"
        assert every(3).describe() == "Every 3 days"
        assert RecurrenceRule(start_date=START).describe() == "Not scheduled"

    def test_dict_round_trip(self):
        rule = RecurrenceRule(start_date=START, interval_days=None, schedule_days=frozenset({5, 1}))
        data = rule.to_dict()
        assert data == {"interval_days": None, "schedule_days": [1, 5], "start_date": "2024-01-01"}
        assert RecurrenceRule.from_dict(data) == rule

    def test_is_weekly(self):
        assert on(2).is_weekly
        assert not every(2).is_weekly


class TestDateRangeEdges:
    """The resolver stays total at the ends of the date range."""

    def test_occurrences_through_date_max(self):
        rule = every(1, start=date(9999, 12, 30))
        assert occurrences_up_to(rule, date.max) == [date(9999, 12, 30), date.max]

    def test_cycle_index_on_date_max(self):
        rule = every(1, start=date(9999, 12, 30))
        assert cycle_workout_index_for(rule, date.max, 2) == 1
        assert cycle_workout_for(rule, date.max, ["A", "B"]) == "B"

    def test_scheduled_on_date_min(self):
        rule = every(1, start=date.min)
        assert is_scheduled_on(rule, date.min)
        assert occurrences_up_to(rule, date.min) == [date.min]


class TestProperties:
    """Relationships between the resolver functions over whole ranges."""

    @pytest.mark.parametrize("interval", [1, 2, 3, 5, 7, 13])
    def test_interval_rules_are_periodic(self, interval):
        rule = every(interval, start=date(2024, 2, 20))
        for offset in range(90):
            day = rule.start_date + timedelta(days=offset)
            assert is_scheduled_on(rule, day) == is_scheduled_on(rule, day + timedelta(days=interval))

    @pytest.mark.parametrize(
        "rule",
        [
            every(3),
            every(10, start=date(2024, 2, 20)),
            on(1, 3, 5),
            on(0),
            on(0, 1, 2, 3, 4, 5, 6, start=date(2024, 2, 27)),
        ],
    )
    def test_occurrences_match_day_by_day_check(self, rule):
        end = date(2024, 4, 30)
        span = (end - rule.start_date).days + 1
        all_days = [rule.start_date + timedelta(days=i) for i in range(span)]

        occurrences = occurrences_up_to(rule, end)

        assert set(occurrences) == {d for d in all_days if is_scheduled_on(rule, d)}
        assert all(not is_scheduled_on(rule, d) for d in set(all_days) - set(occurrences))
