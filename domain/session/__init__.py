"""
Workout session engine.

A session drives a user through an ordered sequence of workouts:
warmup, then each exercise set by set (optionally gated by rest
periods), until the sequence is exhausted and the session completes.

The engine is a pure reducer over immutable state:

    >>> state = SessionState.initial(len(workouts))
    >>> state = reduce(state, SkipWarmup(), workouts)
    >>> state = reduce(state, CompleteSet(), workouts)

Derived values (targets, progress bar) and finalization (log
reconciliation, summary) are computed from the state on read.
"""

from domain.session.actions import (
    CompleteSession,
    CompleteSet,
    NavigateBack,
    NavigateNext,
    RestComplete,
    SessionAction,
    SkipRest,
    SkipWarmup,
    UserAction,
)
from domain.session.finalize import (
    SessionSummary,
    format_duration,
    reconcile_logs,
    summarize,
)
from domain.session.progress import StoryProgress, segment_progress, story_progress
from domain.session.reducer import reduce, reduce_all
from domain.session.state import ExerciseLog, Phase, SessionState
from domain.session.targets import (
    ExerciseLabels,
    exercise_labels,
    rest_duration,
    target_reps,
    total_sets,
)
from domain.session.warmup import WarmupStep, build_warmup, working_rest

__all__ = [
    # State
    "Phase",
    "ExerciseLog",
    "SessionState",
    # Actions
    "SessionAction",
    "UserAction",
    "SkipWarmup",
    "CompleteSet",
    "RestComplete",
    "SkipRest",
    "NavigateBack",
    "NavigateNext",
    "CompleteSession",
    # Reducer
    "reduce",
    "reduce_all",
    # Derived values
    "total_sets",
    "rest_duration",
    "target_reps",
    "exercise_labels",
    "ExerciseLabels",
    "StoryProgress",
    "story_progress",
    "segment_progress",
    # Finalization
    "SessionSummary",
    "reconcile_logs",
    "summarize",
    "format_duration",
    # Warmup
    "WarmupStep",
    "build_warmup",
    "working_rest",
]
