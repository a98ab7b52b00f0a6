"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from datetime import date
from pathlib import Path

import pytest

from fitcycle.config import get_settings
from fitcycle.db import init_db
from fitcycle.models.workout import Workout, WorkoutCycle, WorkoutType
from fitcycle.schedule.recurrence import RecurrenceRule


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def db_path(temp_db_path):
    """An initialized temporary database."""
    asyncio.run(init_db(temp_db_path))
    return temp_db_path


@pytest.fixture
def data_dir(monkeypatch):
    """Point the settings at a fresh data directory.

    Repositories created without an explicit path (CLI and API) use it.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv("FITCYCLE_DATA_DIR", tmpdir)
        monkeypatch.setenv("FITCYCLE_LOG_LEVEL", "WARNING")
        get_settings.cache_clear()
        yield Path(tmpdir)
        get_settings.cache_clear()


@pytest.fixture
def sample_workout():
    """A bench press on Mondays and Thursdays."""
    return Workout(
        name="Bench Press",
        rule=RecurrenceRule(start_date=date(2024, 1, 1), schedule_days=frozenset({1, 4})),
        workout_type=WorkoutType.WEIGHT,
        target=60.0,
        sets=3,
        reps_per_set=8,
    )


@pytest.fixture
def sample_cycle():
    """A push/pull/legs rotation every other day."""
    return WorkoutCycle(
        name="PPL",
        rule=RecurrenceRule(start_date=date(2024, 1, 1), interval_days=2),
        workouts=[
            Workout(name="Push", rule=RecurrenceRule(start_date=date(2024, 1, 1)), target=40.0),
            Workout(name="Pull", rule=RecurrenceRule(start_date=date(2024, 1, 1)), target=50.0),
            Workout(name="Legs", rule=RecurrenceRule(start_date=date(2024, 1, 1)), target=80.0),
        ],
    )
