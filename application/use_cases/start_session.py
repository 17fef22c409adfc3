"""
StartSession Use Case.

Resolves the requested workouts and creates a session over them. A
session is only created once the full sequence (minus unresolved ids)
has been assembled.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from application.use_cases.finish_session import FinishSessionUseCase
from application.use_cases.resolve_workouts import ResolveWorkoutsUseCase
from application.use_cases.run_session import WorkoutSessionService

logger = logging.getLogger(__name__)


@dataclass
class StartSessionResult:
    """Result of the StartSession use case execution."""

    success: bool
    session: Optional[WorkoutSessionService] = None
    missing_ids: List[str] = field(default_factory=list)
    error: Optional[str] = None


class StartSessionUseCase:
    """
    Use case for starting a workout session.

    Usage:
        >>> use_case = StartSessionUseCase(resolver=resolver, finisher=finisher)
        >>> result = use_case.execute(["w1", "w2"], user_id="user-123")
        >>> result.session.state.phase
        <Phase.WARMUP: 'warmup'>
    """

    def __init__(
        self,
        resolver: ResolveWorkoutsUseCase,
        finisher: FinishSessionUseCase,
    ) -> None:
        self._resolver = resolver
        self._finisher = finisher

    def execute(
        self,
        workout_ids: Sequence[str],
        *,
        user_id: Optional[str] = None,
        timed_rest: bool = True,
    ) -> StartSessionResult:
        """
        Resolve workouts and create a session.

        Args:
            workout_ids: Ordered workout ids
            user_id: Authenticated user, used when logs are persisted
            timed_rest: Gate sets with rest periods

        Returns:
            StartSessionResult with the new session, or an error when
            no workout could be resolved
        """
        resolved = self._resolver.execute(workout_ids)

        if not resolved.workouts:
            logger.warning(f"No workouts resolved for session (requested {list(workout_ids)})")
            return StartSessionResult(
                success=False,
                missing_ids=resolved.missing_ids,
                error="None of the requested workouts could be loaded",
            )

        session = WorkoutSessionService(
            resolved.workouts,
            user_id=user_id,
            timed_rest=timed_rest,
            finisher=self._finisher,
        )
        logger.info(
            f"Started session {session.id} with {len(resolved.workouts)} workouts "
            f"for user {user_id or 'anonymous'}"
        )
        return StartSessionResult(
            success=True,
            session=session,
            missing_ids=resolved.missing_ids,
        )
