"""
Domain models for the Workout Session API.

These models are independent of infrastructure concerns (database,
API, cache):
- WorkoutRef: A catalog workout with the fields progression needs
- WorkoutType / IntensityModel: How a workout is prescribed
- Presets: Percentage-of-max presets and warmup ramps

Usage:
    >>> from domain.models import WorkoutRef, IntensityModel

    >>> workout = WorkoutRef(
    ...     id="w-1",
    ...     title="Bench Press",
    ...     intensity_model=IntensityModel.PERCENTAGE_1RM,
    ...     default_preset="strength",
    ... )
"""

from domain.models.presets import (
    PERCENTAGE_1RM_SETS,
    PERCENTAGE_PRESETS,
    PercentagePreset,
    get_percentage_preset,
)
from domain.models.workout_ref import IntensityModel, WorkoutRef, WorkoutType

__all__ = [
    "WorkoutRef",
    "WorkoutType",
    "IntensityModel",
    "PercentagePreset",
    "PERCENTAGE_PRESETS",
    "PERCENTAGE_1RM_SETS",
    "get_percentage_preset",
]
