"""
Workout Catalog Interface (Port).

This module defines the abstract interface for looking up catalog
workouts by id. Implementations return raw records; conversion to
WorkoutRef happens in the application layer.
"""
from typing import Protocol, Optional, List, Dict, Any


class WorkoutCatalog(Protocol):
    """
    Abstract interface for the remote workout catalog.

    Lookups are best-effort: a workout that cannot be found (or cannot
    be fetched) is reported as None rather than raised.
    """

    def get_workout(
        self,
        workout_id: str,
    ) -> Optional[Dict[str, Any]]:
        """
        Fetch a single workout record.

        Args:
            workout_id: Catalog workout id

        Returns:
            Workout record dict or None if not found
        """
        ...

    def list_workouts(self) -> List[Dict[str, Any]]:
        """
        Fetch every workout visible to the service.

        Used to warm the workout cache.

        Returns:
            List of workout record dicts (empty on failure)
        """
        ...
