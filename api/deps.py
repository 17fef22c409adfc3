"""
FastAPI Dependency Providers for the Workout Session API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- The workout cache and session store are process singletons
- Catalog/log repositories and use cases are created per-request
- Auth providers wrap the Clerk/API key logic in backend.auth

Usage in routers:
    from api.deps import get_session_store, get_optional_user

    @router.get("/sessions/{session_id}")
    def get_session(
        session_id: str,
        store: InMemorySessionStore = Depends(get_session_store),
    ):
        return store.get(session_id).view()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_catalog] = lambda: FakeWorkoutCatalog()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    WorkoutCache,
    WorkoutCatalog,
    WorkoutLogRepository,
)
from application.use_cases import (
    FinishSessionUseCase,
    ResolveWorkoutsUseCase,
    StartSessionUseCase,
)

# Concrete implementations
from infrastructure import (
    InMemorySessionStore,
    InMemoryWorkoutCache,
    SupabaseWorkoutCatalog,
    SupabaseWorkoutLogRepository,
)

from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import get_optional_user as _get_optional_user


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_configured:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_workout_catalog(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutCatalog:
    """
    Get WorkoutCatalog implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        WorkoutCatalog: Remote source of workout records
    """
    return SupabaseWorkoutCatalog(client)


def get_log_repo() -> Optional[WorkoutLogRepository]:
    """
    Get WorkoutLogRepository implementation, or None without a database.

    Sessions still run when persistence is unavailable; finishing them
    simply skips the write.
    """
    client = get_supabase_client()
    if client is None:
        return None
    return SupabaseWorkoutLogRepository(client)


@lru_cache
def get_workout_cache() -> WorkoutCache:
    """Process-wide workout cache shared across requests."""
    return InMemoryWorkoutCache(ttl_seconds=_get_settings().workout_cache_ttl_seconds)


@lru_cache
def get_session_store() -> InMemorySessionStore:
    """Process-wide store of live sessions."""
    return InMemorySessionStore(idle_ttl_seconds=_get_settings().session_idle_ttl_seconds)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_resolve_workouts_use_case(
    catalog: WorkoutCatalog = Depends(get_workout_catalog),
    cache: WorkoutCache = Depends(get_workout_cache),
    settings: Settings = Depends(get_settings),
) -> ResolveWorkoutsUseCase:
    return ResolveWorkoutsUseCase(
        catalog=catalog,
        cache=cache,
        max_workers=settings.resolve_max_workers,
    )


def get_finish_session_use_case(
    log_repo: Optional[WorkoutLogRepository] = Depends(get_log_repo),
) -> FinishSessionUseCase:
    return FinishSessionUseCase(log_repo=log_repo)


def get_start_session_use_case(
    resolver: ResolveWorkoutsUseCase = Depends(get_resolve_workouts_use_case),
    finisher: FinishSessionUseCase = Depends(get_finish_session_use_case),
) -> StartSessionUseCase:
    """
    Get StartSessionUseCase with its resolver and finisher wired in.

    Returns:
        StartSessionUseCase: Use case for starting sessions
    """
    return StartSessionUseCase(resolver=resolver, finisher=finisher)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_optional_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> Optional[str]:
    """
    Get the current user ID if authenticated, None otherwise.

    Session endpoints use this: anonymous sessions are allowed but do not
    persist their logs.
    """
    return await _get_optional_user(authorization=authorization, x_api_key=x_api_key)
