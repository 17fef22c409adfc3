"""
Per-workout targets derived from a WorkoutRef.

None of these values are stored on the session; they are computed on
read from the workout's intensity model.
"""

from typing import NamedTuple, Optional

from domain.models.presets import PERCENTAGE_1RM_SETS, get_percentage_preset
from domain.models.workout_ref import IntensityModel, WorkoutRef

TIMED_SET_REST_SECONDS = 30
DEFAULT_SET_REST_SECONDS = 60


def total_sets(workout: WorkoutRef) -> int:
    """Number of sets a workout is performed for."""
    if workout.is_cardio:
        return 1
    if workout.intensity_model == IntensityModel.PERCENTAGE_1RM:
        return PERCENTAGE_1RM_SETS
    return workout.sets or 1


def rest_duration(workout: WorkoutRef) -> int:
    """Rest in seconds between sets of a workout (0 means no rest)."""
    if workout.is_cardio:
        return 0
    if workout.intensity_model == IntensityModel.SETS_TIME:
        return TIMED_SET_REST_SECONDS
    return DEFAULT_SET_REST_SECONDS


def target_reps(workout: WorkoutRef) -> Optional[int]:
    """Reps per set, or None when the workout is not rep-based."""
    if workout.is_cardio:
        return None
    if workout.intensity_model == IntensityModel.PERCENTAGE_1RM:
        return get_percentage_preset(workout.default_preset).reps
    return workout.reps


class ExerciseLabels(NamedTuple):
    sets_label: str
    reps_label: str


def exercise_labels(workout: WorkoutRef) -> ExerciseLabels:
    """
    Human-readable set and rep prescription for the exercise view.

    Examples:
        >>> exercise_labels(WorkoutRef(id="w", title="Row", sets=3, reps=12))
        ExerciseLabels(sets_label='3 sets', reps_label='12 reps')
    """
    if workout.is_cardio:
        return ExerciseLabels("", f"{workout.duration} min" if workout.duration else "")

    model = workout.intensity_model
    if model == IntensityModel.PERCENTAGE_1RM:
        preset = get_percentage_preset(workout.default_preset)
        return ExerciseLabels(
            f"{PERCENTAGE_1RM_SETS} sets",
            f"{preset.reps} reps @ {preset.percentage}%",
        )

    sets_label = f"{workout.sets} sets" if workout.sets else ""
    if model == IntensityModel.SETS_TIME:
        reps_label = f"{workout.duration_per_set}s each" if workout.duration_per_set else ""
    else:
        reps_label = f"{workout.reps} reps" if workout.reps else ""
    return ExerciseLabels(sets_label, reps_label)
