"""
Running workout session.

WorkoutSessionService owns one session for its lifetime: the resolved
workout sequence, the current state, and the hand-off to finalization
once the reducer reaches the completed phase. Actions are processed
one at a time.
"""

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from application.use_cases.finish_session import FinishSessionUseCase
from domain.models import WorkoutRef
from domain.session import (
    Phase,
    SessionState,
    SessionSummary,
    build_warmup,
    exercise_labels,
    reduce,
    rest_duration,
    story_progress,
    target_reps,
    total_sets,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WorkoutSessionService:
    """
    A single in-progress workout session.

    Usage:
        >>> session = WorkoutSessionService(workouts, user_id="user-123",
        ...                                 finisher=FinishSessionUseCase(log_repo))
        >>> session.dispatch(SkipWarmup())
        >>> session.dispatch(CompleteSet())
        >>> session.view()["phase"]
        'rest'
    """

    def __init__(
        self,
        workouts: Sequence[WorkoutRef],
        *,
        user_id: Optional[str] = None,
        timed_rest: bool = True,
        finisher: Optional[FinishSessionUseCase] = None,
        session_id: Optional[str] = None,
        clock: Clock = _utcnow,
    ) -> None:
        self.id = session_id or str(uuid.uuid4())
        self.user_id = user_id
        self._workouts = tuple(workouts)
        self._finisher = finisher or FinishSessionUseCase()
        self._clock = clock
        self._state = SessionState.initial(
            len(self._workouts), timed_rest=timed_rest, start_time=clock()
        )
        self._summary: Optional[SessionSummary] = None
        self._lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def workouts(self) -> List[WorkoutRef]:
        return list(self._workouts)

    @property
    def summary(self) -> Optional[SessionSummary]:
        """Finalized summary, available once the session completes."""
        return self._summary

    @property
    def current_workout(self) -> Optional[WorkoutRef]:
        i = self._state.current_exercise_index
        if self._state.phase in (Phase.EXERCISE, Phase.REST) and i < len(self._workouts):
            return self._workouts[i]
        return None

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def dispatch(self, action) -> SessionState:
        """
        Apply one action and finalize the session if it just completed.

        Args:
            action: A SessionAction variant

        Returns:
            The new session state
        """
        with self._lock:
            previous = self._state
            state = reduce(previous, action, self._workouts)
            self._state = state

            if state.phase == Phase.COMPLETED and previous.phase != Phase.COMPLETED:
                logger.info(f"Session {self.id} completed, finalizing")
                result = self._finisher.execute(
                    state, self._workouts, user_id=self.user_id, now=self._clock()
                )
                self._summary = result.summary

            return state

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------

    def warmup(self, working_weight: float) -> List[Dict[str, Any]]:
        """Warmup ramp for the first strength exercise in the sequence."""
        first = next((w for w in self._workouts if not w.is_cardio), None)
        if first is None:
            return []
        return [
            {"label": s.label, "reps": s.reps, "weight": s.weight, "rest": s.rest}
            for s in build_warmup(working_weight, first.default_preset)
        ]

    def view(self) -> Dict[str, Any]:
        """Everything the presentation shell needs to render the session."""
        state = self._state
        workout = self.current_workout
        progress = story_progress(state, self._workouts)

        exercise: Optional[Dict[str, Any]] = None
        if workout is not None:
            labels = exercise_labels(workout)
            exercise = {
                "workout": workout.model_dump(mode="json"),
                "total_sets": total_sets(workout),
                "target_reps": target_reps(workout),
                "rest_seconds": rest_duration(workout),
                "sets_label": labels.sets_label,
                "reps_label": labels.reps_label,
            }

        return {
            "session_id": self.id,
            "phase": state.phase.value,
            "current_exercise_index": state.current_exercise_index,
            "exercise_count": state.sequence_length,
            "current_set": state.current_set,
            "rest_duration": state.rest_duration if state.phase == Phase.REST else None,
            "started_at": state.start_time.isoformat(),
            "exercise": exercise,
            "progress": {
                "total_segments": progress.total_segments,
                "current_segment": progress.current_segment,
                "segment_progress": progress.segment_progress,
                "fills": progress.fills,
            },
            "logs": [log.model_dump() for log in state.exercise_logs],
            "summary": self._summary.to_dict() if self._summary else None,
        }
