"""
Pydantic schemas for API requests.

Organized by feature/domain:
- sessions: Workout session requests
"""

from api.schemas.sessions import (
    ExitSessionRequest,
    SessionActionRequest,
    StartSessionRequest,
)

__all__ = [
    "ExitSessionRequest",
    "SessionActionRequest",
    "StartSessionRequest",
]
