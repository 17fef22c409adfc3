"""
Workout Log Repository Interface (Port).

This module defines the abstract interface for persisting the log of
completed exercises produced when a session finishes.
"""
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Protocol, Optional, List, Dict, Any


class LogPersistenceError(Exception):
    """Raised when a batch of workout logs cannot be written."""


@dataclass
class WorkoutLogEntry:
    """One completed exercise, as written to the log store."""
    workout_id: str
    sets: int
    reps: Optional[int] = None
    duration: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class WorkoutLogRepository(Protocol):
    """
    Abstract interface for workout log persistence.

    Writes are all-or-nothing per batch. Failures are raised as
    LogPersistenceError; callers decide whether to swallow them.
    """

    def save_batch(
        self,
        user_id: str,
        logged_at: datetime,
        entries: List[WorkoutLogEntry],
    ) -> Dict[str, Any]:
        """
        Write a batch of log entries for one user.

        Args:
            user_id: Authenticated user id
            logged_at: Timestamp recorded on every entry
            entries: Completed exercises

        Returns:
            Dict with "count" of rows written and the stored "logs"

        Raises:
            LogPersistenceError: If the write fails
        """
        ...
