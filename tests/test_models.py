"""Tests for data models."""

from datetime import date

from fitcycle.models.session import WorkoutSession
from fitcycle.models.stats import WeeklyReport
from fitcycle.models.workout import Workout, WorkoutCycle, WorkoutType, inert_rule
from fitcycle.schedule.recurrence import RecurrenceRule


class TestWorkout:
    """Tests for Workout model."""

    def test_target_display_weight(self, sample_workout):
        assert sample_workout.get_target_display() == "3 x 8 @ 60 kg"

    def test_target_display_time(self):
        workout = Workout(
            name="Plank",
            rule=inert_rule(),
            workout_type=WorkoutType.TIME,
            target=2,
            sets=3,
        )
        assert workout.get_target_display() == "3 x 2 min"
        assert workout.target_unit == "min"

    def test_to_dict_includes_schedule(self, sample_workout):
        """Test workout serialization."""
        data = sample_workout.to_dict()

        assert data["name"] == "Bench Press"
        assert data["workout_type"] == "weight"
        assert data["schedule_days"] == [1, 4]
        assert data["interval_days"] is None
        assert data["start_date"] == "2024-01-01"
        assert data["cycle_id"] is None

    def test_from_dict(self):
        """Test workout deserialization."""
        workout = Workout.from_dict(
            {
                "name": "Squat",
                "workout_type": "weight",
                "target": "100",
                "interval_days": 3,
                "start_date": "2024-02-01",
            },
            id=7,
        )
        assert workout.id == 7
        assert workout.target == 100.0
        assert workout.rule == RecurrenceRule(start_date=date(2024, 2, 1), interval_days=3)
        assert workout.sets == 3
        assert not workout.is_cycle_member

    def test_cycle_member(self):
        workout = Workout(name="Push", rule=inert_rule(), cycle_id=4, cycle_order=0)
        assert workout.is_cycle_member


class TestWorkoutCycle:
    """Tests for WorkoutCycle model."""

    def test_members_sorted_by_cycle_order(self):
        cycle = WorkoutCycle(
            name="AB",
            rule=RecurrenceRule(start_date=date(2024, 1, 1), interval_days=1),
            workouts=[
                Workout(name="B", rule=inert_rule(), cycle_order=1),
                Workout(name="A", rule=inert_rule(), cycle_order=0),
            ],
        )
        assert [w.name for w in cycle.workouts] == ["A", "B"]

    def test_to_dict(self, sample_cycle):
        data = sample_cycle.to_dict()
        assert data["name"] == "PPL"
        assert data["interval_days"] == 2
        assert [w["name"] for w in data["workouts"]] == ["Push", "Pull", "Legs"]


class TestWorkoutSession:
    """Tests for WorkoutSession model."""

    def test_status_display(self):
        session = WorkoutSession(workout_id=1, date=date(2024, 1, 1))
        assert session.get_status_display() == "Not Started"
        session.sets_completed = 2
        assert session.get_status_display() == "In Progress (2 sets)"
        session.completed = True
        assert session.get_status_display() == "Completed"

    def test_total_reps(self):
        session = WorkoutSession(workout_id=1, date=date(2024, 1, 1), reps_per_set=[10, 10, 8])
        assert session.total_reps == 28

    def test_weight_lifted(self, sample_workout):
        session = WorkoutSession(
            workout_id=1,
            date=date(2024, 1, 1),
            sets_completed=3,
            weight_used=70.0,
            workout=sample_workout,
        )
        assert session.weight_lifted() == 70.0 * 3 * 8

    def test_weight_lifted_falls_back_to_target(self, sample_workout):
        session = WorkoutSession(
            workout_id=1, date=date(2024, 1, 1), sets_completed=2, workout=sample_workout
        )
        assert session.weight_lifted() == 60.0 * 2 * 8

    def test_time_workouts_lift_nothing(self):
        plank = Workout(name="Plank", rule=inert_rule(), workout_type=WorkoutType.TIME, target=2)
        session = WorkoutSession(workout_id=1, date=date(2024, 1, 1), sets_completed=3, workout=plank)
        assert session.weight_lifted() == 0.0

    def test_to_dict(self):
        data = WorkoutSession(workout_id=3, date=date(2024, 1, 2), completed=True).to_dict()
        assert data["date"] == "2024-01-02"
        assert data["completed"] is True
        assert data["workout"] is None


class TestWeeklyReport:
    def test_change(self):
        report = WeeklyReport(
            week_start=date(2024, 1, 8),
            week_end=date(2024, 1, 14),
            completed=2,
            last_week_completed=5,
            total_sets=6,
            total_reps=60,
            total_weight_lifted=0.0,
        )
        assert report.change == -3
        assert report.to_dict()["change"] == -3
