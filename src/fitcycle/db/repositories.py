"""Data access layer for fitcycle."""

import json
from datetime import date, datetime
from pathlib import Path

import aiosqlite
from loguru import logger

from ..models.session import WorkoutSession
from ..models.workout import Workout, WorkoutCycle, WorkoutType, inert_rule
from ..schedule.recurrence import RecurrenceRule
from .engine import connect, get_db_path

WORKOUT_ORDER = "display_order ASC, created_at DESC, id DESC"

# Fields a session update may change
SESSION_FIELDS = ("completed", "sets_completed", "reps_per_set", "weight_used", "duration")


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def _rule_params(rule: RecurrenceRule) -> tuple:
    return (
        rule.interval_days,
        json.dumps(sorted(rule.schedule_days)),
        rule.start_date.isoformat(),
    )


def _row_to_rule(row: aiosqlite.Row) -> RecurrenceRule:
    return RecurrenceRule(
        start_date=date.fromisoformat(row["start_date"][:10]),
        interval_days=row["interval_days"],
        schedule_days=frozenset(json.loads(row["schedule_days"] or "[]")),
    )


class WorkoutRepository:
    """Repository for workouts."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, workout: Workout) -> int:
        """Create a new workout."""
        async with connect(self.db_path) as db:
            workout_id = await self._insert(db, workout)
            await db.commit()
        logger.info(f"Created workout {workout_id} ({workout.name})")
        return workout_id

    async def get(self, workout_id: int) -> Workout | None:
        """Get a workout by ID."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM workouts WHERE id = ?", (workout_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_workout(row)

    async def list_all(self) -> list[Workout]:
        """List all workouts, cycle members included."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(f"SELECT * FROM workouts ORDER BY {WORKOUT_ORDER}")
            rows = await cursor.fetchall()
            return [self._row_to_workout(row) for row in rows]

    async def list_standalone(self) -> list[Workout]:
        """List workouts that are not members of a cycle."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                f"SELECT * FROM workouts WHERE cycle_id IS NULL ORDER BY {WORKOUT_ORDER}"
            )
            rows = await cursor.fetchall()
            return [self._row_to_workout(row) for row in rows]

    async def update(self, workout: Workout) -> None:
        """Update an existing workout."""
        if workout.id is None:
            raise ValueError("Workout must have an ID to update")

        async with connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE workouts SET
                    name = ?, workout_type = ?, target = ?, sets = ?, reps_per_set = ?,
                    rest_time = ?, notes = ?, ai_tip = ?,
                    interval_days = ?, schedule_days = ?, start_date = ?,
                    updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (
                    workout.name,
                    workout.workout_type.value,
                    workout.target,
                    workout.sets,
                    workout.reps_per_set,
                    workout.rest_time,
                    workout.notes,
                    workout.ai_tip,
                    *_rule_params(workout.rule),
                    workout.id,
                ),
            )
            await db.commit()
        logger.info(f"Updated workout {workout.id}")

    async def set_tip(self, workout_id: int, tip: str) -> None:
        """Replace the coaching tip of a workout."""
        async with connect(self.db_path) as db:
            await db.execute(
                "UPDATE workouts SET ai_tip = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                (tip, workout_id),
            )
            await db.commit()

    async def reorder(self, workout_ids: list[int]) -> int:
        """Set display order to the position of each ID in the list.

        Unknown IDs are skipped. Returns the number of workouts updated.
        """
        updated = 0
        async with connect(self.db_path) as db:
            for position, workout_id in enumerate(workout_ids):
                cursor = await db.execute(
                    "UPDATE workouts SET display_order = ? WHERE id = ?",
                    (position, workout_id),
                )
                updated += cursor.rowcount
            await db.commit()
        logger.debug(f"Reordered {updated} workouts")
        return updated

    async def delete(self, workout_id: int) -> bool:
        """Delete a workout and its sessions."""
        async with connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM workouts WHERE id = ?", (workout_id,))
            await db.commit()
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"Deleted workout {workout_id}")
        return deleted

    @staticmethod
    async def _insert(db: aiosqlite.Connection, workout: Workout) -> int:
        cursor = await db.execute(
            """
            INSERT INTO workouts
            (name, workout_type, target, sets, reps_per_set, rest_time, notes, ai_tip,
             interval_days, schedule_days, start_date, cycle_id, cycle_order, display_order)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                workout.name,
                workout.workout_type.value,
                workout.target,
                workout.sets,
                workout.reps_per_set,
                workout.rest_time,
                workout.notes,
                workout.ai_tip,
                *_rule_params(workout.rule),
                workout.cycle_id,
                workout.cycle_order,
                workout.display_order,
            ),
        )
        return cursor.lastrowid

    @staticmethod
    def _row_to_workout(row: aiosqlite.Row) -> Workout:
        """Convert a database row to a Workout."""
        return Workout(
            id=row["id"],
            name=row["name"],
            rule=_row_to_rule(row),
            workout_type=WorkoutType(row["workout_type"]),
            target=row["target"],
            sets=row["sets"],
            reps_per_set=row["reps_per_set"],
            rest_time=row["rest_time"],
            notes=row["notes"],
            ai_tip=row["ai_tip"],
            cycle_id=row["cycle_id"],
            cycle_order=row["cycle_order"],
            display_order=row["display_order"] or 0,
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )


class CycleRepository:
    """Repository for workout cycles and their members."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, cycle: WorkoutCycle) -> int:
        """Create a cycle together with its member workouts."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO cycles (name, interval_days, schedule_days, start_date)
                VALUES (?, ?, ?, ?)
                """,
                (cycle.name, *_rule_params(cycle.rule)),
            )
            cycle_id = cursor.lastrowid
            await self._insert_members(db, cycle_id, cycle.workouts)
            await db.commit()
        logger.info(f"Created cycle {cycle_id} ({cycle.name}, {len(cycle.workouts)} workouts)")
        return cycle_id

    async def get(self, cycle_id: int) -> WorkoutCycle | None:
        """Get a cycle by ID with its members in cycle order."""
        async with connect(self.db_path) as db:
            cursor = await db.execute("SELECT * FROM cycles WHERE id = ?", (cycle_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            members = await self._members(db, cycle_id)
            return self._row_to_cycle(row, members)

    async def list_all(self) -> list[WorkoutCycle]:
        """List all cycles, newest first."""
        async with connect(self.db_path) as db:
            cursor = await db.execute("SELECT * FROM cycles ORDER BY created_at DESC, id DESC")
            rows = await cursor.fetchall()
            cycles = []
            for row in rows:
                members = await self._members(db, row["id"])
                cycles.append(self._row_to_cycle(row, members))
            return cycles

    async def update(self, cycle: WorkoutCycle) -> None:
        """Update a cycle, replacing its member workouts."""
        if cycle.id is None:
            raise ValueError("Cycle must have an ID to update")

        async with connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE cycles SET
                    name = ?, interval_days = ?, schedule_days = ?, start_date = ?,
                    updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (cycle.name, *_rule_params(cycle.rule), cycle.id),
            )
            await db.execute("DELETE FROM workouts WHERE cycle_id = ?", (cycle.id,))
            await self._insert_members(db, cycle.id, cycle.workouts)
            await db.commit()
        logger.info(f"Updated cycle {cycle.id}")

    async def delete(self, cycle_id: int) -> bool:
        """Delete a cycle; member workouts and their sessions go with it."""
        async with connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM cycles WHERE id = ?", (cycle_id,))
            await db.commit()
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"Deleted cycle {cycle_id}")
        return deleted

    async def _insert_members(
        self, db: aiosqlite.Connection, cycle_id: int, workouts: list[Workout]
    ) -> None:
        for index, workout in enumerate(workouts):
            workout.cycle_id = cycle_id
            workout.cycle_order = index
            # Members follow the cycle's schedule
            workout.rule = inert_rule()
            workout.id = await WorkoutRepository._insert(db, workout)

    async def _members(self, db: aiosqlite.Connection, cycle_id: int) -> list[Workout]:
        cursor = await db.execute(
            "SELECT * FROM workouts WHERE cycle_id = ? ORDER BY cycle_order ASC",
            (cycle_id,),
        )
        rows = await cursor.fetchall()
        return [WorkoutRepository._row_to_workout(row) for row in rows]

    def _row_to_cycle(self, row: aiosqlite.Row, members: list[Workout]) -> WorkoutCycle:
        """Convert a database row to a WorkoutCycle."""
        return WorkoutCycle(
            id=row["id"],
            name=row["name"],
            rule=_row_to_rule(row),
            workouts=members,
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )


class SessionRepository:
    """Repository for workout sessions."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def start(self, workout: Workout, day: date) -> WorkoutSession:
        """Start a session of ``workout`` on ``day``.

        Returns the existing session if one was already started that day.
        """
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT OR IGNORE INTO sessions (workout_id, date, weight_used, reps_per_set)
                VALUES (?, ?, ?, '[]')
                """,
                (workout.id, day.isoformat(), workout.target),
            )
            await db.commit()
            if cursor.rowcount:
                logger.info(f"Started session for workout {workout.id} on {day}")

            cursor = await db.execute(
                "SELECT * FROM sessions WHERE workout_id = ? AND date = ?",
                (workout.id, day.isoformat()),
            )
            row = await cursor.fetchone()
            session = self._row_to_session(row)
        session.workout = workout
        return session

    async def get(self, session_id: int) -> WorkoutSession | None:
        """Get a session by ID."""
        sessions = await self._query("SELECT * FROM sessions WHERE id = ?", (session_id,))
        return sessions[0] if sessions else None

    async def list_all(self) -> list[WorkoutSession]:
        """List all sessions, oldest first."""
        return await self._query("SELECT * FROM sessions ORDER BY date ASC, id ASC")

    async def list_between(self, start: date, end: date) -> list[WorkoutSession]:
        """List sessions dated within [start, end], newest first."""
        return await self._query(
            "SELECT * FROM sessions WHERE date >= ? AND date <= ? ORDER BY date DESC, id DESC",
            (start.isoformat(), end.isoformat()),
        )

    async def list_for_day(self, day: date) -> list[WorkoutSession]:
        """List sessions of one calendar day."""
        return await self._query(
            "SELECT * FROM sessions WHERE date = ? ORDER BY id ASC", (day.isoformat(),)
        )

    async def list_completed_since(self, since: date, before: date) -> list[WorkoutSession]:
        """List completed sessions dated in [since, before), newest first."""
        return await self._query(
            """
            SELECT * FROM sessions
            WHERE completed = 1 AND date >= ? AND date < ?
            ORDER BY date DESC, id DESC
            """,
            (since.isoformat(), before.isoformat()),
        )

    async def update(self, session_id: int, changes: dict) -> WorkoutSession | None:
        """Apply a partial update; fields missing from ``changes`` are kept."""
        fields = {k: v for k, v in changes.items() if k in SESSION_FIELDS and v is not None}
        if fields:
            assignments = ", ".join(f"{name} = ?" for name in fields)
            params = [
                json.dumps(v) if name == "reps_per_set" else v
                for name, v in fields.items()
            ]
            async with connect(self.db_path) as db:
                await db.execute(
                    f"UPDATE sessions SET {assignments} WHERE id = ?",
                    (*params, session_id),
                )
                await db.commit()
            logger.debug(f"Updated session {session_id}: {sorted(fields)}")
        return await self.get(session_id)

    async def delete(self, session_id: int) -> bool:
        """Delete a session."""
        async with connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM sessions WHERE id = ?", (session_id,))
            await db.commit()
            return cursor.rowcount > 0

    async def _query(self, sql: str, params: tuple = ()) -> list[WorkoutSession]:
        """Run a session query and attach each session's workout."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(sql, params)
            rows = await cursor.fetchall()
            sessions = [self._row_to_session(row) for row in rows]

            workout_ids = sorted({s.workout_id for s in sessions})
            if workout_ids:
                placeholders = ", ".join("?" for _ in workout_ids)
                cursor = await db.execute(
                    f"SELECT * FROM workouts WHERE id IN ({placeholders})", workout_ids
                )
                workouts = {
                    row["id"]: WorkoutRepository._row_to_workout(row)
                    for row in await cursor.fetchall()
                }
                for session in sessions:
                    session.workout = workouts.get(session.workout_id)
            return sessions

    def _row_to_session(self, row: aiosqlite.Row) -> WorkoutSession:
        """Convert a database row to a WorkoutSession."""
        return WorkoutSession(
            id=row["id"],
            workout_id=row["workout_id"],
            date=date.fromisoformat(row["date"]),
            completed=bool(row["completed"]),
            sets_completed=row["sets_completed"] or 0,
            reps_per_set=json.loads(row["reps_per_set"] or "[]"),
            weight_used=row["weight_used"],
            duration=row["duration"],
            created_at=_parse_timestamp(row["created_at"]),
        )
