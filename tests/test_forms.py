"""Tests for input forms."""

from datetime import date

import pytest
from pydantic import ValidationError

from fitcycle.forms.validation import (
    CycleForm,
    SessionUpdateForm,
    WorkoutForm,
)
from fitcycle.models.workout import WorkoutType


class TestWorkoutForm:
    """Tests for WorkoutForm."""

    def test_weekdays_are_sorted_and_deduplicated(self):
        form = WorkoutForm(name="Squat", schedule_days=[5, 1, 5, 3])
        assert form.schedule_days == [1, 3, 5]

    def test_to_workout(self):
        form = WorkoutForm(
            name="  Squat ",
            target=100,
            interval_days=3,
            start_date=date(2024, 1, 1),
        )
        workout = form.to_workout()
        assert workout.name == "Squat"
        assert workout.workout_type == WorkoutType.WEIGHT
        assert workout.rule.interval_days == 3
        assert workout.rule.start_date == date(2024, 1, 1)
        assert workout.cycle_id is None

    def test_start_date_defaults_to_today(self):
        assert WorkoutForm(name="Row", interval_days=1).start_date == date.today()

    def test_requires_a_schedule(self):
        with pytest.raises(ValidationError):
            WorkoutForm(name="Squat")

    @pytest.mark.parametrize("interval", [0, -1])
    def test_rejects_non_positive_interval(self, interval):
        with pytest.raises(ValidationError):
            WorkoutForm(name="Squat", interval_days=interval)

    def test_rejects_out_of_range_weekday(self):
        with pytest.raises(ValidationError, match="weekday"):
            WorkoutForm(name="Squat", schedule_days=[7])

    def test_rejects_blank_name(self):
        with pytest.raises(ValidationError):
            WorkoutForm(name="   ", interval_days=1)

    def test_rejects_negative_target(self):
        with pytest.raises(ValidationError):
            WorkoutForm(name="Squat", interval_days=1, target=-5)

    def test_apply_to_replaces_schedule(self, sample_workout):
        form = WorkoutForm(name="Bench", interval_days=2, start_date=date(2024, 3, 1))
        form.apply_to(sample_workout)
        assert sample_workout.name == "Bench"
        assert sample_workout.rule.interval_days == 2
        assert sample_workout.rule.schedule_days == frozenset()


class TestCycleForm:
    """Tests for CycleForm."""

    def test_to_cycle(self):
        form = CycleForm(
            name="PPL",
            interval_days=2,
            start_date=date(2024, 1, 1),
            workouts=[{"name": "Push"}, {"name": "Pull", "target": 50}, {"name": "Legs"}],
        )
        cycle = form.to_cycle()
        assert cycle.name == "PPL"
        assert [w.name for w in cycle.workouts] == ["Push", "Pull", "Legs"]
        assert cycle.workouts[1].target == 50
        assert cycle.rule.interval_days == 2

    def test_requires_members(self):
        with pytest.raises(ValidationError):
            CycleForm(name="Empty", interval_days=1, workouts=[])

    def test_requires_a_schedule(self):
        with pytest.raises(ValidationError):
            CycleForm(name="PPL", workouts=[{"name": "Push"}])


class TestSessionUpdateForm:
    def test_omitted_fields_are_none(self):
        form = SessionUpdateForm(sets_completed=2)
        assert form.model_dump(exclude_none=True) == {"sets_completed": 2}

    def test_rejects_negative_reps(self):
        with pytest.raises(ValidationError):
            SessionUpdateForm(reps_per_set=[10, -1])
