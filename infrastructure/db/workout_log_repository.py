"""
Supabase implementation of WorkoutLogRepository.

Writes the finalized log of a session to the ``workout_logs`` table in a
single insert. Column names follow the mobile API (camelCase).
"""
import logging
from datetime import datetime
from typing import List, Dict, Any

from supabase import Client

from application.ports.workout_log_repository import (
    LogPersistenceError,
    WorkoutLogEntry,
)

logger = logging.getLogger(__name__)


def _entry_to_row(user_id: str, logged_at: datetime, entry: WorkoutLogEntry) -> Dict[str, Any]:
    """Convert a log entry to a workout_logs row."""
    return {
        "workoutId": entry.workout_id,
        "userId": user_id,
        "date": logged_at.isoformat(),
        "sets": entry.sets,
        "reps": entry.reps,
        "duration": entry.duration,
    }


class SupabaseWorkoutLogRepository:
    """
    Supabase implementation of WorkoutLogRepository protocol.

    Unlike the catalog, write failures are raised so the caller can decide
    how to recover.
    """

    def __init__(self, client: Client, *, table: str = "workout_logs"):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Name of the workout logs table
        """
        self._client = client
        self._table = table

    def save_batch(
        self,
        user_id: str,
        logged_at: datetime,
        entries: List[WorkoutLogEntry],
    ) -> Dict[str, Any]:
        """Insert all entries in one request."""
        if not entries:
            return {"count": 0, "logs": []}

        rows = [_entry_to_row(user_id, logged_at, entry) for entry in entries]
        try:
            result = self._client.table(self._table).insert(rows).execute()
        except Exception as e:
            raise LogPersistenceError(f"Failed to insert {len(rows)} workout logs: {e}") from e

        if not result.data:
            raise LogPersistenceError("Workout log insert returned no rows")

        logger.info(f"Inserted {len(result.data)} workout logs for user {user_id}")
        return {"count": len(result.data), "logs": result.data}
