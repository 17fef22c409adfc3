"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_session_store, get_workout_cache
from application.ports import WorkoutCache
from infrastructure.cache import InMemorySessionStore

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}


@router.get("/health/sessions")
def session_health(
    store: InMemorySessionStore = Depends(get_session_store),
    cache: WorkoutCache = Depends(get_workout_cache),
):
    """Live session count and workout cache statistics."""
    return {
        "status": "ok",
        "active_sessions": len(store),
        "workout_cache": cache.info(),
    }
