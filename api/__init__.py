"""
API package for the Workout Session API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_workout_catalog,
    get_workout_cache,
    get_log_repo,
    get_session_store,
    get_start_session_use_case,
    get_optional_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    # Repositories and caches
    "get_workout_catalog",
    "get_workout_cache",
    "get_log_repo",
    "get_session_store",
    # Use cases
    "get_start_session_use_case",
    # Authentication
    "get_optional_user",
]
