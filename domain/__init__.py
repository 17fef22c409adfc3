"""
Domain layer for the Workout Session API.

This package contains pure domain models and the session engine, all
independent of infrastructure concerns (database, API, cache).
"""

from domain.models import IntensityModel, WorkoutRef, WorkoutType

__all__ = [
    "IntensityModel",
    "WorkoutRef",
    "WorkoutType",
]
