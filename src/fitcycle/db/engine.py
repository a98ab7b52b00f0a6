"""Database engine setup and initialization."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiosqlite
from loguru import logger

from ..config import get_settings


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    settings = get_settings()
    if data_dir is None:
        data_dir = settings.data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / settings.db_filename


@asynccontextmanager
async def connect(db_path: Path) -> AsyncIterator[aiosqlite.Connection]:
    """Open a connection with foreign keys enforced and dict-like rows."""
    async with aiosqlite.connect(db_path) as db:
        db.row_factory = aiosqlite.Row
        await db.execute("PRAGMA foreign_keys = ON")
        yield db


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Cycles: shared schedule for an ordered set of workouts
        await db.execute("""
            CREATE TABLE IF NOT EXISTS cycles (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                interval_days INTEGER,
                schedule_days TEXT DEFAULT '[]',
                start_date TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Workouts: standalone, or members of a cycle (schedule columns inert)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workouts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                workout_type TEXT NOT NULL DEFAULT 'weight',
                target REAL NOT NULL DEFAULT 0,
                sets INTEGER NOT NULL DEFAULT 3,
                reps_per_set INTEGER NOT NULL DEFAULT 10,
                rest_time INTEGER NOT NULL DEFAULT 60,
                notes TEXT,
                ai_tip TEXT,
                interval_days INTEGER,
                schedule_days TEXT DEFAULT '[]',
                start_date TEXT NOT NULL,
                cycle_id INTEGER,
                cycle_order INTEGER,
                display_order INTEGER DEFAULT 0,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (cycle_id) REFERENCES cycles(id) ON DELETE CASCADE
            )
        """)

        # Sessions: one per workout per calendar day
        await db.execute("""
            CREATE TABLE IF NOT EXISTS sessions (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                workout_id INTEGER NOT NULL,
                date TEXT NOT NULL,
                completed INTEGER DEFAULT 0,
                sets_completed INTEGER DEFAULT 0,
                reps_per_set TEXT DEFAULT '[]',
                weight_used REAL,
                duration INTEGER,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                UNIQUE (workout_id, date),
                FOREIGN KEY (workout_id) REFERENCES workouts(id) ON DELETE CASCADE
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workouts_cycle
            ON workouts(cycle_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_sessions_date
            ON sessions(date)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_sessions_workout
            ON sessions(workout_id)
        """)

        await db.commit()

    logger.debug(f"Database ready at {db_path}")
