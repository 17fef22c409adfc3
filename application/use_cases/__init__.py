"""
Application Use Cases for the Workout Session API.

This package contains application-level use cases that orchestrate the
session engine and coordinate between ports/adapters. Use cases are the
entry points for business operations and contain the workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return result dataclasses, not API responses

Usage:
    from application.use_cases import (
        ResolveWorkoutsUseCase,
        StartSessionUseCase,
        FinishSessionUseCase,
    )

    resolver = ResolveWorkoutsUseCase(catalog=catalog, cache=cache)
    finisher = FinishSessionUseCase(log_repo=log_repo)

    result = StartSessionUseCase(resolver, finisher).execute(
        ["w-1", "w-2"],
        user_id="user-123",
    )
    session = result.session
    session.dispatch(SkipWarmup())
"""

from application.use_cases.resolve_workouts import (
    ResolveWorkoutsResult,
    ResolveWorkoutsUseCase,
)
from application.use_cases.finish_session import (
    FinishSessionResult,
    FinishSessionUseCase,
)
from application.use_cases.run_session import WorkoutSessionService
from application.use_cases.start_session import (
    StartSessionResult,
    StartSessionUseCase,
)

__all__ = [
    # ResolveWorkouts
    "ResolveWorkoutsUseCase",
    "ResolveWorkoutsResult",
    # FinishSession
    "FinishSessionUseCase",
    "FinishSessionResult",
    # Session
    "WorkoutSessionService",
    # StartSession
    "StartSessionUseCase",
    "StartSessionResult",
]
