"""
FinishSession Use Case.

Finalizes a completed session: reconciles the exercise logs, measures
elapsed time and hands the logs to the log repository. Persistence is
best-effort; a failed write is logged and the summary is still
returned so the user is never blocked from finishing.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Sequence

from application.ports import WorkoutLogEntry, WorkoutLogRepository
from domain.models import WorkoutRef
from domain.session import SessionState, SessionSummary, summarize

logger = logging.getLogger(__name__)


@dataclass
class FinishSessionResult:
    """Result of the FinishSession use case execution."""

    summary: SessionSummary
    persisted: bool = False
    error: Optional[str] = None


class FinishSessionUseCase:
    """
    Use case for finalizing a session.

    Orchestrates the following workflow:
    1. Reconcile logged and partially completed exercises
    2. Compute elapsed time
    3. Persist the logs when a user is known and there is something to log
    4. Return the summary regardless of the persistence outcome

    Usage:
        >>> use_case = FinishSessionUseCase(log_repo=log_repo)
        >>> result = use_case.execute(state, workouts, user_id="user-123")
        >>> result.summary.exercise_count
        2
    """

    def __init__(self, log_repo: Optional[WorkoutLogRepository] = None) -> None:
        """
        Initialize the use case.

        Args:
            log_repo: Repository for workout logs. None disables persistence.
        """
        self._log_repo = log_repo

    def execute(
        self,
        state: SessionState,
        workouts: Sequence[WorkoutRef],
        *,
        user_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> FinishSessionResult:
        """
        Finalize a session.

        Args:
            state: Session state, normally in the completed phase
            workouts: The workout sequence the session ran through
            user_id: Authenticated user, if any
            now: Completion time (defaults to the current UTC time)

        Returns:
            FinishSessionResult with the summary and persistence outcome
        """
        now = now or datetime.now(timezone.utc)
        summary = summarize(state, workouts, now=now)

        if not user_id:
            logger.info("Session finished without a user, skipping log persistence")
            return FinishSessionResult(summary=summary)
        if not summary.logs:
            logger.info(f"Session for user {user_id} finished with nothing to log")
            return FinishSessionResult(summary=summary)
        if self._log_repo is None:
            logger.warning("No log repository configured, session logs not saved")
            return FinishSessionResult(summary=summary, error="Log persistence not configured")

        entries = [
            WorkoutLogEntry(
                workout_id=log.workout_id,
                sets=log.sets_completed,
                reps=log.reps,
                duration=log.duration,
            )
            for log in summary.logs
        ]

        try:
            self._log_repo.save_batch(user_id, now, entries)
        except Exception as e:
            logger.exception(f"Failed to save session logs for user {user_id}: {e}")
            return FinishSessionResult(summary=summary, error=str(e))

        summary.persisted = True
        logger.info(f"Saved {len(entries)} workout logs for user {user_id}")
        return FinishSessionResult(summary=summary, persisted=True)
