"""
Workout session reducer.

A pure state-transition function ``(state, action, workouts) -> state``.
Every action is guarded by phase: an action the current phase does not
accept returns the same state object unchanged. Completion is never a
user action; it is applied automatically once the exercise index runs
past the end of the sequence.

Usage:
    >>> from domain.models import WorkoutRef
    >>> from domain.session import CompleteSet, SessionState, SkipWarmup, reduce
    >>> workouts = [WorkoutRef(id="a", title="Push-up", sets=1)]
    >>> state = SessionState.initial(len(workouts))
    >>> state = reduce(state, SkipWarmup(), workouts)
    >>> state = reduce(state, CompleteSet(), workouts)
    >>> state.phase
    <Phase.COMPLETED: 'completed'>
"""

import logging
from typing import Callable, Dict, Iterable, Sequence, Tuple, Type

from domain.models.workout_ref import WorkoutRef
from domain.session.actions import (
    CompleteSession,
    CompleteSet,
    NavigateBack,
    NavigateNext,
    RestComplete,
    SessionAction,
    SkipRest,
    SkipWarmup,
)
from domain.session.state import ExerciseLog, Phase, SessionState
from domain.session.targets import rest_duration, target_reps, total_sets

logger = logging.getLogger(__name__)

Workouts = Sequence[WorkoutRef]


# =============================================================================
# Helpers
# =============================================================================


def _with_progress(progress: Tuple[int, ...], index: int, value: int) -> Tuple[int, ...]:
    return progress[:index] + (value,) + progress[index + 1:]


def _log_entry(workout: WorkoutRef, sets_completed: int) -> ExerciseLog:
    return ExerciseLog(
        workout_id=workout.id,
        title=workout.title,
        sets_completed=sets_completed,
        reps=target_reps(workout),
        duration=workout.duration,
    )


def _upsert_log(logs: Tuple[ExerciseLog, ...], entry: ExerciseLog) -> Tuple[ExerciseLog, ...]:
    """Replace the entry for the same workout in place, or append it."""
    for i, log in enumerate(logs):
        if log.workout_id == entry.workout_id:
            return logs[:i] + (entry,) + logs[i + 1:]
    return logs + (entry,)


def _remove_log(logs: Tuple[ExerciseLog, ...], workout_id: str) -> Tuple[ExerciseLog, ...]:
    return tuple(log for log in logs if log.workout_id != workout_id)


def _finish_rest(state: SessionState, workouts: Workouts) -> SessionState:
    """Leave rest and count the set that was completed before it."""
    i = state.current_exercise_index
    limit = total_sets(workouts[i])
    done = min(state.set_progress[i] + 1, limit)
    return state.model_copy(
        update={
            "phase": Phase.EXERCISE,
            "set_progress": _with_progress(state.set_progress, i, done),
        }
    )


# =============================================================================
# Transitions
# =============================================================================


def _skip_warmup(state: SessionState, workouts: Workouts) -> SessionState:
    if state.phase != Phase.WARMUP:
        return state
    return state.model_copy(update={"phase": Phase.EXERCISE})


def _complete_set(state: SessionState, workouts: Workouts) -> SessionState:
    if state.phase == Phase.REST:
        # Tapping forward during rest skips the timer
        return _finish_rest(state, workouts)
    if state.phase != Phase.EXERCISE:
        return state

    i = state.current_exercise_index
    if i >= state.sequence_length:
        return state

    workout = workouts[i]
    limit = total_sets(workout)
    done = state.set_progress[i]
    if done >= limit:
        return state

    if done + 1 >= limit:
        return state.model_copy(
            update={
                "set_progress": _with_progress(state.set_progress, i, limit),
                "exercise_logs": _upsert_log(state.exercise_logs, _log_entry(workout, limit)),
                "current_exercise_index": i + 1,
            }
        )

    rest = rest_duration(workout)
    if state.timed_rest and rest > 0:
        # The set is counted when the rest ends
        return state.model_copy(update={"phase": Phase.REST, "rest_duration": rest})

    return state.model_copy(
        update={"set_progress": _with_progress(state.set_progress, i, done + 1)}
    )


def _rest_complete(state: SessionState, workouts: Workouts) -> SessionState:
    if state.phase != Phase.REST:
        return state
    return _finish_rest(state, workouts)


def _navigate_back(state: SessionState, workouts: Workouts) -> SessionState:
    if state.phase == Phase.REST:
        return state.model_copy(update={"phase": Phase.EXERCISE})
    if state.phase != Phase.EXERCISE:
        return state

    i = state.current_exercise_index
    current = state.current_set
    if current > 1:
        return state.model_copy(
            update={"set_progress": _with_progress(state.set_progress, i, current - 1)}
        )

    if i == 0:
        return state.model_copy(update={"phase": Phase.WARMUP})

    previous = workouts[i - 1]
    if state.log_for(previous.id) is None:
        # Skipped with NavigateNext: keep whatever it recorded
        return state.model_copy(update={"current_exercise_index": i - 1})

    # Back into the previous exercise at its last set; its log is reopened
    return state.model_copy(
        update={
            "current_exercise_index": i - 1,
            "set_progress": _with_progress(state.set_progress, i - 1, total_sets(previous)),
            "exercise_logs": _remove_log(state.exercise_logs, previous.id),
        }
    )


def _navigate_next(state: SessionState, workouts: Workouts) -> SessionState:
    if state.phase == Phase.WARMUP:
        return _skip_warmup(state, workouts)
    if state.phase != Phase.EXERCISE:
        return state
    return state.model_copy(
        update={"current_exercise_index": state.current_exercise_index + 1}
    )


def _complete_session(state: SessionState, workouts: Workouts) -> SessionState:
    if state.phase == Phase.EXERCISE and state.current_exercise_index >= state.sequence_length:
        return state.model_copy(update={"phase": Phase.COMPLETED})
    return state


_HANDLERS: Dict[Type, Callable[[SessionState, Workouts], SessionState]] = {
    SkipWarmup: _skip_warmup,
    CompleteSet: _complete_set,
    RestComplete: _rest_complete,
    SkipRest: _rest_complete,
    NavigateBack: _navigate_back,
    NavigateNext: _navigate_next,
    CompleteSession: _complete_session,
}


# =============================================================================
# Public API
# =============================================================================


def reduce(state: SessionState, action: SessionAction, workouts: Workouts) -> SessionState:
    """
    Apply one action to a session state.

    Args:
        state: Current state
        action: One of the SessionAction variants
        workouts: The resolved workout sequence the state was created for

    Returns:
        The next state. The same object is returned when the action is
        not accepted in the current phase.

    Raises:
        ValueError: If the workout sequence does not match the state
        TypeError: If the action is not a known SessionAction
    """
    if len(workouts) != state.sequence_length:
        raise ValueError(
            f"State tracks {state.sequence_length} exercises, got {len(workouts)} workouts"
        )

    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unknown session action: {action!r}")

    next_state = handler(state, workouts)
    if next_state is state:
        logger.debug(f"Ignoring {action.type} in phase {state.phase.value}")
        return state

    # Running off the end of the sequence completes the session
    return _complete_session(next_state, workouts)


def reduce_all(state: SessionState, actions: Iterable[SessionAction], workouts: Workouts) -> SessionState:
    """Apply a sequence of actions in order."""
    for action in actions:
        state = reduce(state, action, workouts)
    return state
