"""
In-memory implementation of WorkoutCache.

Entries expire after a fixed TTL (five minutes by default). Expired
entries are evicted lazily when read.
"""
import logging
import threading
import time
from typing import Callable, Dict, Iterable, Optional, Tuple, Any

from domain.models import WorkoutRef

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300


class InMemoryWorkoutCache:
    """
    Process-local TTL cache of WorkoutRefs keyed by workout id.

    Usage:
        cache = InMemoryWorkoutCache(ttl_seconds=300)
        cache.set(workout)
        cache.get(workout.id)
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[WorkoutRef, float]] = {}
        self._lock = threading.Lock()

    def _is_fresh(self, stored_at: float) -> bool:
        return self._clock() - stored_at <= self._ttl

    def get(self, workout_id: str) -> Optional[WorkoutRef]:
        with self._lock:
            entry = self._entries.get(workout_id)
            if entry is None:
                return None
            workout, stored_at = entry
            if not self._is_fresh(stored_at):
                logger.debug(f"Workout cache entry expired: {workout_id}")
                del self._entries[workout_id]
                return None
            return workout

    def set(self, workout: WorkoutRef) -> None:
        with self._lock:
            self._entries[workout.id] = (workout, self._clock())

    def set_many(self, workouts: Iterable[WorkoutRef]) -> None:
        now = self._clock()
        with self._lock:
            for workout in workouts:
                self._entries[workout.id] = (workout, now)

    def invalidate(self) -> None:
        logger.info("Invalidating workout cache")
        with self._lock:
            self._entries.clear()

    def info(self) -> Dict[str, Any]:
        with self._lock:
            fresh = sum(1 for _, stored_at in self._entries.values() if self._is_fresh(stored_at))
            return {
                "workout_count": fresh,
                "ttl_seconds": self._ttl,
            }
