"""
Fake Implementations for Testing.

This package provides in-memory fake implementations of the application
ports for fast, isolated testing. No database or external dependencies
required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutCatalog, create_workout_catalog

    catalog = FakeWorkoutCatalog()
    catalog.seed([{"id": "w1", "title": "Squat", "sets": 3, "reps": 5}])

    # Factory function with the standard sample workouts
    catalog = create_workout_catalog()
"""
from typing import Any, Dict, List, Optional

from tests.fakes.workout_cache import FakeWorkoutCache
from tests.fakes.workout_catalog import FakeWorkoutCatalog
from tests.fakes.workout_log_repository import FakeWorkoutLogRepository


# =============================================================================
# Sample Data
# =============================================================================


def sample_workout_records() -> List[Dict[str, Any]]:
    """
    One workout per intensity model, in the camelCase shape of catalog rows.
    """
    return [
        {
            "id": "squat",
            "title": "Back Squat",
            "workoutType": "strength",
            "intensityModel": "sets_reps",
            "sets": 3,
            "reps": 5,
            "category": "legs",
        },
        {
            "id": "plank",
            "title": "Plank",
            "workoutType": "strength",
            "intensityModel": "sets_time",
            "sets": 2,
            "durationPerSet": 45,
        },
        {
            "id": "bench",
            "title": "Bench Press",
            "workoutType": "strength",
            "intensityModel": "percentage_1rm",
            "defaultPreset": "strength",
        },
        {
            "id": "run",
            "title": "Easy Run",
            "workoutType": "cardio",
            "duration": 20,
        },
        {
            "id": "curl",
            "title": "Bicep Curl",
            "sets": 2,
            "reps": 12,
        },
    ]


# =============================================================================
# Factory Functions
# =============================================================================


def create_workout_catalog(
    *,
    records: Optional[List[Dict[str, Any]]] = None,
) -> FakeWorkoutCatalog:
    """
    Create a FakeWorkoutCatalog seeded with sample workouts.

    Args:
        records: Records to seed, or None for sample_workout_records()

    Returns:
        Pre-populated FakeWorkoutCatalog
    """
    catalog = FakeWorkoutCatalog()
    catalog.seed(sample_workout_records() if records is None else records)
    return catalog


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Fake implementations
    "FakeWorkoutCatalog",
    "FakeWorkoutCache",
    "FakeWorkoutLogRepository",
    # Factory functions
    "create_workout_catalog",
    "sample_workout_records",
]
