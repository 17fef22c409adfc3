"""Backend services for the Workout Session API."""

from backend.services.rest_timer import RestTimer, RestTimerRunner

__all__ = [
    "RestTimer",
    "RestTimerRunner",
]
