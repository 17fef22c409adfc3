"""
WorkoutRef value object - the workout as seen by a running session.

A WorkoutRef carries the identity of a catalog workout plus the
denormalized fields needed to drive set/rep/rest progression. It is
resolved once when a session starts and never changes afterwards.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class WorkoutType(str, Enum):
    """Broad kind of workout."""

    STRENGTH = "strength"
    CARDIO = "cardio"


class IntensityModel(str, Enum):
    """
    How the work of a strength workout is prescribed.

    - SETS_REPS: N sets of M reps
    - SETS_TIME: N sets held/performed for a number of seconds each
    - PERCENTAGE_1RM: fixed number of sets at a percentage of the one-rep max
    - LEGACY: workouts created before intensity models existed (sets/reps)
    """

    SETS_REPS = "sets_reps"
    SETS_TIME = "sets_time"
    PERCENTAGE_1RM = "percentage_1rm"
    LEGACY = "legacy"


# Catalog records come from the mobile API in camelCase; our own rows
# and fixtures use snake_case. Both are accepted.
_RECORD_ALIASES: Dict[str, str] = {
    "workoutType": "workout_type",
    "intensityModel": "intensity_model",
    "durationPerSet": "duration_per_set",
    "defaultPreset": "default_preset",
}


class WorkoutRef(BaseModel):
    """
    Immutable reference to a catalog workout.

    Examples:
        >>> squat = WorkoutRef(id="w1", title="Back Squat", sets=5, reps=5)
        >>> squat.is_cardio
        False

        >>> WorkoutRef.from_record({
        ...     "id": "w2",
        ...     "title": "Plank",
        ...     "workoutType": "strength",
        ...     "intensityModel": "sets_time",
        ...     "sets": 3,
        ...     "durationPerSet": 45,
        ... }).duration_per_set
        45
    """

    id: str = Field(..., min_length=1, description="Catalog workout id")
    title: str = Field(..., description="Display title")
    workout_type: WorkoutType = Field(default=WorkoutType.STRENGTH)
    intensity_model: IntensityModel = Field(default=IntensityModel.LEGACY)

    sets: Optional[int] = Field(default=None, ge=1, description="Sets (strength only)")
    reps: Optional[int] = Field(default=None, ge=1, description="Reps per set (strength only)")
    duration: Optional[int] = Field(
        default=None, ge=0, description="Duration in minutes (cardio only)"
    )
    duration_per_set: Optional[int] = Field(
        default=None, ge=0, description="Seconds per set for timed sets"
    )
    default_preset: Optional[str] = Field(
        default=None, description="Named percentage preset, e.g. 'hypertrophy'"
    )

    # Display only
    category: Optional[str] = None
    intensity: Optional[str] = None

    @field_validator("intensity_model", mode="before")
    @classmethod
    def default_unknown_model(cls, v: Any) -> Any:
        """Missing or unknown intensity models behave like legacy workouts."""
        if v is None:
            return IntensityModel.LEGACY
        if isinstance(v, str) and v not in {m.value for m in IntensityModel}:
            return IntensityModel.LEGACY
        return v

    @field_validator("workout_type", mode="before")
    @classmethod
    def default_missing_type(cls, v: Any) -> Any:
        return WorkoutType.STRENGTH if v is None else v

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "WorkoutRef":
        """
        Build a WorkoutRef from a raw catalog row.

        Unknown keys are ignored. camelCase keys used by the mobile
        API are mapped to their snake_case field names.

        Args:
            record: Row from the workouts table or the cache

        Returns:
            WorkoutRef for the record
        """
        data: Dict[str, Any] = {}
        for key, value in record.items():
            name = _RECORD_ALIASES.get(key, key)
            if name in cls.model_fields:
                data[name] = value
        return cls.model_validate(data)

    @property
    def is_cardio(self) -> bool:
        return self.workout_type == WorkoutType.CARDIO

    def __str__(self) -> str:
        return f"{self.title} ({self.id})"

    model_config = {
        "frozen": True,
        "use_enum_values": False,
    }
