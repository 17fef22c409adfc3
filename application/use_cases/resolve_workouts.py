"""
ResolveWorkouts Use Case.

Turns an ordered list of workout ids into the ordered WorkoutRef
sequence a session runs through. The local cache is consulted first;
ids it does not hold are fetched from the remote catalog concurrently.
Ids that cannot be resolved are dropped with a warning.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from application.ports import WorkoutCache, WorkoutCatalog
from domain.models import WorkoutRef

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 4


@dataclass
class ResolveWorkoutsResult:
    """Result of the ResolveWorkouts use case execution."""

    workouts: List[WorkoutRef] = field(default_factory=list)
    missing_ids: List[str] = field(default_factory=list)
    cache_hits: int = 0

    @property
    def is_complete(self) -> bool:
        """True when every requested id was resolved."""
        return not self.missing_ids


class ResolveWorkoutsUseCase:
    """
    Use case for resolving workout ids to WorkoutRefs.

    Orchestrates the following workflow:
    1. Drop blank ids
    2. Serve what the cache holds
    3. Fetch the rest from the catalog in parallel
    4. Cache fetched workouts
    5. Return the resolved workouts in input order

    Usage:
        >>> use_case = ResolveWorkoutsUseCase(catalog=catalog, cache=cache)
        >>> result = use_case.execute(["w1", "w2", "w3"])
        >>> [w.id for w in result.workouts]
        ['w1', 'w3']
        >>> result.missing_ids
        ['w2']
    """

    def __init__(
        self,
        catalog: WorkoutCatalog,
        cache: WorkoutCache,
        *,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            catalog: Remote workout catalog
            cache: Local workout cache
            max_workers: Upper bound on concurrent catalog fetches
        """
        self._catalog = catalog
        self._cache = cache
        self._max_workers = max(1, max_workers)

    def execute(self, workout_ids: Sequence[str]) -> ResolveWorkoutsResult:
        """
        Resolve workout ids, preserving their order.

        Args:
            workout_ids: Ordered workout ids (duplicates are kept)

        Returns:
            ResolveWorkoutsResult with resolved workouts and missing ids
        """
        ids = [wid.strip() for wid in workout_ids if wid and wid.strip()]
        resolved: Dict[int, WorkoutRef] = {}
        misses: List[Tuple[int, str]] = []

        for position, workout_id in enumerate(ids):
            cached = self._cache.get(workout_id)
            if cached is not None:
                resolved[position] = cached
            else:
                misses.append((position, workout_id))

        cache_hits = len(resolved)
        missing: Dict[int, str] = {}

        if misses:
            workers = min(self._max_workers, len(misses))
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="resolve_") as executor:
                futures = {
                    executor.submit(self._fetch, workout_id): (position, workout_id)
                    for position, workout_id in misses
                }
                for future in as_completed(futures):
                    position, workout_id = futures[future]
                    workout = future.result()
                    if workout is None:
                        missing[position] = workout_id
                        continue
                    resolved[position] = workout

            fetched = [resolved[p] for p, _ in misses if p in resolved]
            if fetched:
                self._cache.set_many(fetched)

        for position in sorted(missing):
            logger.warning(f"Could not load workout {missing[position]}, dropping it from the session")

        logger.info(
            f"Resolved {len(resolved)}/{len(ids)} workouts "
            f"({cache_hits} from cache, {len(missing)} missing)"
        )
        return ResolveWorkoutsResult(
            workouts=[resolved[p] for p in sorted(resolved)],
            missing_ids=[missing[p] for p in sorted(missing)],
            cache_hits=cache_hits,
        )

    def _fetch(self, workout_id: str) -> Optional[WorkoutRef]:
        """Fetch and convert one workout; any failure reads as not found."""
        try:
            record = self._catalog.get_workout(workout_id)
        except Exception as e:
            logger.warning(f"Catalog lookup failed for workout {workout_id}: {e}")
            return None

        if not record:
            return None

        try:
            return WorkoutRef.from_record(record)
        except ValidationError as e:
            logger.warning(f"Workout {workout_id} has an invalid record: {e}")
            return None
