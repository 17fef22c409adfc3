"""
Workout Cache Interface (Port).

Opaque key-value cache of resolved workouts, read before the remote
catalog when a session starts.
"""
from typing import Protocol, Optional, Iterable, Dict, Any

from domain.models import WorkoutRef


class WorkoutCache(Protocol):
    """
    Abstract interface for the local workout cache.

    Entries expire after an implementation-defined TTL; an expired
    entry reads as a miss.
    """

    def get(self, workout_id: str) -> Optional[WorkoutRef]:
        """Return the cached workout or None on a miss."""
        ...

    def set(self, workout: WorkoutRef) -> None:
        """Store or refresh one workout."""
        ...

    def set_many(self, workouts: Iterable[WorkoutRef]) -> None:
        """Store or refresh several workouts at once."""
        ...

    def invalidate(self) -> None:
        """Drop every cached workout (call after workout mutations)."""
        ...

    def info(self) -> Dict[str, Any]:
        """Cache statistics for debugging (entry count, TTL)."""
        ...
