"""
Supabase implementation of WorkoutCatalog.

Reads catalog workouts from the ``workouts`` table. Lookups never
raise: a missing row or a failed query reads as None.
"""
import logging
from typing import Optional, List, Dict, Any

from supabase import Client

logger = logging.getLogger(__name__)


class SupabaseWorkoutCatalog:
    """
    Supabase implementation of WorkoutCatalog protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client, *, table: str = "workouts"):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Name of the workouts table
        """
        self._client = client
        self._table = table

    def get_workout(self, workout_id: str) -> Optional[Dict[str, Any]]:
        """Get a single workout by ID."""
        try:
            result = self._client.table(self._table).select("*").eq("id", workout_id).limit(1).execute()
            if result.data:
                return result.data[0]
            logger.info(f"Workout {workout_id} not found in catalog")
            return None
        except Exception as e:
            logger.error(f"Failed to get workout {workout_id}: {e}")
            return None

    def list_workouts(self) -> List[Dict[str, Any]]:
        """Get every workout, ordered by title."""
        try:
            result = self._client.table(self._table).select("*").order("title").execute()
            return result.data if result.data else []
        except Exception as e:
            logger.error(f"Failed to list workouts: {e}")
            return []
