"""
Session finalization: log reconciliation and summary.

When a session completes, the logs of fully completed exercises are
merged with synthesized entries for exercises the user left part-way
through, so no completed set is dropped.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from domain.models.workout_ref import WorkoutRef
from domain.session.state import ExerciseLog, SessionState
from domain.session.targets import target_reps


def reconcile_logs(state: SessionState, workouts: Sequence[WorkoutRef]) -> List[ExerciseLog]:
    """
    Build the definitive log list for a session.

    Starts from the logged exercises in order, then appends a partial
    entry for every exercise (in sequence order) with at least one
    completed set and no entry yet.

    Args:
        state: Session state (normally completed)
        workouts: The resolved workout sequence

    Returns:
        List with exactly one entry per workout that has completed sets
    """
    logs = list(state.exercise_logs)
    logged = {log.workout_id for log in logs}

    for i, workout in enumerate(workouts):
        done = state.set_progress[i] if i < len(state.set_progress) else 0
        if done <= 0 or workout.id in logged:
            continue
        logs.append(
            ExerciseLog(
                workout_id=workout.id,
                title=workout.title,
                sets_completed=done,
                reps=target_reps(workout),
                duration=workout.duration,
            )
        )
        logged.add(workout.id)

    return logs


def format_duration(seconds: int) -> str:
    """Format duration in seconds to M:SS or H:MM:SS."""
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


@dataclass
class SessionSummary:
    """What the summary view shows after a session."""

    total_time_ms: int
    logs: List[ExerciseLog] = field(default_factory=list)
    persisted: bool = False

    @property
    def exercise_count(self) -> int:
        return len(self.logs)

    @property
    def total_sets(self) -> int:
        return sum(log.sets_completed for log in self.logs)

    @property
    def duration_formatted(self) -> str:
        return format_duration(self.total_time_ms // 1000)

    def to_dict(self) -> dict:
        return {
            "total_time_ms": self.total_time_ms,
            "duration_formatted": self.duration_formatted,
            "exercise_count": self.exercise_count,
            "total_sets": self.total_sets,
            "persisted": self.persisted,
            "logs": [log.model_dump() for log in self.logs],
        }


def summarize(
    state: SessionState,
    workouts: Sequence[WorkoutRef],
    now: Optional[datetime] = None,
) -> SessionSummary:
    """Reconcile logs and measure elapsed wall-clock time."""
    now = now or datetime.now(timezone.utc)
    elapsed = max(0, int((now - state.start_time).total_seconds() * 1000))
    return SessionSummary(total_time_ms=elapsed, logs=reconcile_logs(state, workouts))
