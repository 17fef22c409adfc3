"""
Infrastructure Layer for the Workout Session API.

This package contains concrete implementations of the application ports:
- db/: Supabase catalog and workout log repositories
- cache/: In-memory workout cache and live session store
- local/: JSON file adapters used by the terminal shell
"""

from infrastructure.db import (
    SupabaseWorkoutCatalog,
    SupabaseWorkoutLogRepository,
)
from infrastructure.cache import (
    InMemoryWorkoutCache,
    InMemorySessionStore,
    SessionNotFoundError,
)
from infrastructure.local import (
    JsonFileWorkoutCatalog,
    JsonLinesWorkoutLogRepository,
)

__all__ = [
    "SupabaseWorkoutCatalog",
    "SupabaseWorkoutLogRepository",
    "InMemoryWorkoutCache",
    "InMemorySessionStore",
    "SessionNotFoundError",
    "JsonFileWorkoutCatalog",
    "JsonLinesWorkoutLogRepository",
]
