"""
Repository Interfaces (Ports) for the Workout Session API.

This package defines abstract interfaces that decouple the session
engine from infrastructure (database, cache). Implementations are
provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutCatalog, WorkoutCache

    class ResolveWorkoutsUseCase:
        def __init__(self, catalog: WorkoutCatalog, cache: WorkoutCache):
            self._catalog = catalog
            self._cache = cache
"""

# Catalog lookup
from application.ports.workout_catalog import WorkoutCatalog

# Local cache
from application.ports.workout_cache import WorkoutCache

# Log persistence
from application.ports.workout_log_repository import (
    WorkoutLogRepository,
    WorkoutLogEntry,
    LogPersistenceError,
)

__all__ = [
    # Catalog
    "WorkoutCatalog",
    # Cache
    "WorkoutCache",
    # Logs
    "WorkoutLogRepository",
    "WorkoutLogEntry",
    "LogPersistenceError",
]
