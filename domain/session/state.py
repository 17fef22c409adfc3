"""
Session state for a running workout session.

SessionState is an immutable value: the reducer never mutates it and
always returns a new instance via model_copy(update=...).
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field


class Phase(str, Enum):
    """Phases a session moves through."""

    WARMUP = "warmup"
    EXERCISE = "exercise"
    REST = "rest"
    COMPLETED = "completed"


DEFAULT_REST_SECONDS = 60


class ExerciseLog(BaseModel):
    """Work completed for one workout in a session."""

    workout_id: str
    title: str
    sets_completed: int = Field(..., ge=0)
    reps: Optional[int] = None
    duration: Optional[int] = None

    model_config = {"frozen": True}


class SessionState(BaseModel):
    """
    The engine's only mutable entity, modelled as a sequence of values.

    Attributes:
        phase: Current phase
        current_exercise_index: 0-based position in the workout sequence.
            Equal to the sequence length once every exercise is done.
        set_progress: Completed-set counter per exercise, indexed by position
        rest_duration: Seconds of the active (or last) rest period
        start_time: When the session was created (UTC)
        exercise_logs: Logged exercises, at most one per workout id
        timed_rest: Whether sets are gated by rest periods
    """

    phase: Phase = Phase.WARMUP
    current_exercise_index: int = Field(default=0, ge=0)
    set_progress: Tuple[int, ...] = ()
    rest_duration: int = DEFAULT_REST_SECONDS
    start_time: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    exercise_logs: Tuple[ExerciseLog, ...] = ()
    timed_rest: bool = True

    model_config = {"frozen": True}

    @classmethod
    def initial(
        cls,
        sequence_length: int,
        *,
        timed_rest: bool = True,
        start_time: Optional[datetime] = None,
    ) -> "SessionState":
        """
        Create the state for a freshly mounted session.

        Args:
            sequence_length: Number of resolved workouts
            timed_rest: Gate sets with rest periods
            start_time: Override the capture timestamp (tests)

        Returns:
            SessionState in the warmup phase with every counter at zero
        """
        return cls(
            phase=Phase.WARMUP,
            current_exercise_index=0,
            set_progress=(0,) * sequence_length,
            timed_rest=timed_rest,
            start_time=start_time or datetime.now(timezone.utc),
        )

    @property
    def sequence_length(self) -> int:
        return len(self.set_progress)

    @property
    def current_set(self) -> int:
        """Completed sets of the current exercise (0 past the end)."""
        if self.current_exercise_index < self.sequence_length:
            return self.set_progress[self.current_exercise_index]
        return 0

    @property
    def is_completed(self) -> bool:
        return self.phase == Phase.COMPLETED

    def log_for(self, workout_id: str) -> Optional[ExerciseLog]:
        """Return the log entry for a workout, if any."""
        for log in self.exercise_logs:
            if log.workout_id == workout_id:
                return log
        return None
