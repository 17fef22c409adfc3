"""
Infrastructure Database Layer.

Supabase-backed implementations of the catalog and log ports defined in
application.ports.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseWorkoutCatalog, SupabaseWorkoutLogRepository

    client = create_client(SUPABASE_URL, SUPABASE_KEY)
    catalog = SupabaseWorkoutCatalog(client)
    log_repo = SupabaseWorkoutLogRepository(client)
"""

from infrastructure.db.workout_catalog import SupabaseWorkoutCatalog
from infrastructure.db.workout_log_repository import SupabaseWorkoutLogRepository

__all__ = [
    "SupabaseWorkoutCatalog",
    "SupabaseWorkoutLogRepository",
]
