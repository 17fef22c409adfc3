"""In-memory caches: resolved workouts and live sessions."""

from infrastructure.cache.workout_cache import InMemoryWorkoutCache, DEFAULT_TTL_SECONDS
from infrastructure.cache.session_store import InMemorySessionStore, SessionNotFoundError

__all__ = [
    "InMemoryWorkoutCache",
    "DEFAULT_TTL_SECONDS",
    "InMemorySessionStore",
    "SessionNotFoundError",
]
