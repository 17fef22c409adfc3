"""
Sessions router.

Presentation shell for guided workout sessions over HTTP. Each request
forwards one user intent to the session engine and returns the
resulting session view.

Endpoints:
- POST /sessions - Resolve workouts and start a session
- GET /sessions/{session_id} - Current session view
- POST /sessions/{session_id}/actions - Apply one user action
- POST /sessions/{session_id}/exit - Confirm or cancel leaving the session
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from api.deps import (
    get_optional_user,
    get_session_store,
    get_settings,
    get_start_session_use_case,
)
from api.schemas.sessions import (
    ExitSessionRequest,
    SessionActionRequest,
    StartSessionRequest,
)
from application.use_cases import StartSessionUseCase
from backend.settings import Settings
from domain.session import Phase
from infrastructure.cache import InMemorySessionStore

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/sessions",
    tags=["Sessions"],
)


@router.post("", status_code=201)
def start_session(
    request: StartSessionRequest,
    user_id: Optional[str] = Depends(get_optional_user),
    use_case: StartSessionUseCase = Depends(get_start_session_use_case),
    store: InMemorySessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
):
    """
    Start a session over the requested workouts.

    Unresolvable ids are dropped; the response lists them under
    ``missing_ids``. Fails with 422 when none of the ids resolve.
    """
    timed_rest = settings.timed_rest_enabled if request.timed_rest is None else request.timed_rest
    result = use_case.execute(request.workout_ids, user_id=user_id, timed_rest=timed_rest)

    if not result.success:
        raise HTTPException(
            status_code=422,
            detail={"message": result.error, "missing_ids": result.missing_ids},
        )

    session = store.create(result.session)
    return {**session.view(), "missing_ids": result.missing_ids}


@router.get("/{session_id}")
def get_session(
    session_id: str,
    store: InMemorySessionStore = Depends(get_session_store),
):
    """Get the current view of a session."""
    return store.get(session_id).view()


@router.post("/{session_id}/actions")
def apply_action(
    session_id: str,
    request: SessionActionRequest,
    store: InMemorySessionStore = Depends(get_session_store),
):
    """
    Apply one action to a session.

    Actions that do not apply in the current phase leave the session
    unchanged. Once the session completes the response carries the
    summary and the session is released.
    """
    session = store.get(session_id)
    state = session.dispatch(request.root)
    view = session.view()

    if state.phase == Phase.COMPLETED:
        store.discard(session_id)
        logger.info(f"Session {session_id} completed and released")

    return view


@router.post("/{session_id}/exit")
def exit_session(
    session_id: str,
    request: ExitSessionRequest,
    store: InMemorySessionStore = Depends(get_session_store),
):
    """
    Confirm or cancel leaving a session.

    Confirming discards the session without saving any logs. Cancelling
    returns the unchanged session view.
    """
    if not request.confirm:
        return store.get(session_id).view()

    store.discard(session_id)
    return {"session_id": session_id, "discarded": True}
