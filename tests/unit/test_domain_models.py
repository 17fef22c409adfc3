"""
Unit tests for domain models.

These tests verify:
- WorkoutRef validation and defaults
- Construction from catalog records (camelCase and snake_case)
- Percentage preset lookup
"""

import pytest
from pydantic import ValidationError


@pytest.mark.unit
class TestWorkoutRef:
    """Tests for the WorkoutRef value object."""

    def test_defaults(self):
        """A bare workout is a legacy strength workout."""
        from domain.models import IntensityModel, WorkoutRef, WorkoutType

        workout = WorkoutRef(id="w1", title="Squat")
        assert workout.workout_type == WorkoutType.STRENGTH
        assert workout.intensity_model == IntensityModel.LEGACY
        assert workout.is_cardio is False

    def test_unknown_intensity_model_is_legacy(self):
        from domain.models import IntensityModel, WorkoutRef

        workout = WorkoutRef(id="w1", title="Squat", intensity_model="tempo")
        assert workout.intensity_model == IntensityModel.LEGACY

    def test_none_fields_fall_back(self):
        from domain.models import IntensityModel, WorkoutRef, WorkoutType

        workout = WorkoutRef(id="w1", title="Squat", workout_type=None, intensity_model=None)
        assert workout.workout_type == WorkoutType.STRENGTH
        assert workout.intensity_model == IntensityModel.LEGACY

    def test_is_frozen(self):
        from domain.models import WorkoutRef

        workout = WorkoutRef(id="w1", title="Squat")
        with pytest.raises(ValidationError):
            workout.title = "Deadlift"

    def test_rejects_empty_id(self):
        from domain.models import WorkoutRef

        with pytest.raises(ValidationError):
            WorkoutRef(id="", title="Squat")

    def test_rejects_zero_sets(self):
        from domain.models import WorkoutRef

        with pytest.raises(ValidationError):
            WorkoutRef(id="w1", title="Squat", sets=0)

    def test_from_camel_case_record(self):
        """Catalog rows from the mobile API use camelCase keys."""
        from domain.models import IntensityModel, WorkoutRef

        workout = WorkoutRef.from_record({
            "id": "w2",
            "title": "Plank",
            "workoutType": "strength",
            "intensityModel": "sets_time",
            "sets": 3,
            "durationPerSet": 45,
            "defaultPreset": None,
            "createdAt": "2024-01-01T00:00:00Z",
        })
        assert workout.intensity_model == IntensityModel.SETS_TIME
        assert workout.duration_per_set == 45
        assert workout.sets == 3

    def test_from_snake_case_record(self):
        from domain.models import WorkoutRef

        workout = WorkoutRef.from_record({
            "id": "run",
            "title": "Run",
            "workout_type": "cardio",
            "duration": 30,
            "user_id": "ignored",
        })
        assert workout.is_cardio
        assert workout.duration == 30

    def test_from_record_requires_title(self):
        from domain.models import WorkoutRef

        with pytest.raises(ValidationError):
            WorkoutRef.from_record({"id": "w1"})

    def test_str(self):
        from domain.models import WorkoutRef

        assert str(WorkoutRef(id="w1", title="Squat")) == "Squat (w1)"


@pytest.mark.unit
class TestPercentagePresets:

    @pytest.mark.parametrize("name,reps,pct", [
        ("hypertrophy", 10, 70),
        ("strength", 5, 80),
        ("power", 3, 85),
        ("endurance", 15, 60),
    ])
    def test_known_presets(self, name, reps, pct):
        from domain.models import get_percentage_preset

        preset = get_percentage_preset(name)
        assert preset.reps == reps
        assert preset.percentage == pct

    @pytest.mark.parametrize("name", [None, "", "unknown"])
    def test_fallback_is_hypertrophy(self, name):
        from domain.models import PERCENTAGE_PRESETS, get_percentage_preset

        assert get_percentage_preset(name) == PERCENTAGE_PRESETS["hypertrophy"]
