"""
Session Schemas.

Request bodies for the session endpoints. Responses are the session view
dict built by WorkoutSessionService.view().
"""

from typing import List, Optional

from pydantic import BaseModel, Field, RootModel

from domain.session import UserAction


class StartSessionRequest(BaseModel):
    """Request body for POST /sessions."""
    workout_ids: List[str] = Field(
        ...,
        min_length=1,
        description="Ordered workout ids forming the session sequence",
    )
    timed_rest: Optional[bool] = Field(
        default=None,
        description="Gate sets with rest periods. Defaults to the server setting.",
    )


class SessionActionRequest(RootModel[UserAction]):
    """Request body for POST /sessions/{session_id}/actions, e.g. {"type": "complete_set"}."""


class ExitSessionRequest(BaseModel):
    """Request body for POST /sessions/{session_id}/exit."""
    confirm: bool = Field(
        ...,
        description="True discards the session; False cancels the exit prompt",
    )
