"""
Shared pytest fixtures.

Sessions are tested against in-memory fakes; the API fixtures build an app
with create_app() and override the data-access dependencies.
"""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from api import deps
from backend.main import create_app
from backend.settings import Settings
from domain.models import WorkoutRef
from infrastructure.cache import InMemorySessionStore
from tests.fakes import (
    FakeWorkoutCache,
    FakeWorkoutLogRepository,
    create_workout_catalog,
    sample_workout_records,
)
from tests.fakes.conftest import override_dependency, reset_overrides


@pytest.fixture
def workouts() -> List[WorkoutRef]:
    """The sample workouts as WorkoutRefs, in catalog order."""
    return [WorkoutRef.from_record(r) for r in sample_workout_records()]


@pytest.fixture
def catalog():
    return create_workout_catalog()


@pytest.fixture
def cache():
    return FakeWorkoutCache()


@pytest.fixture
def log_repo():
    return FakeWorkoutLogRepository()


@pytest.fixture
def session_store():
    return InMemorySessionStore()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def current_user() -> dict:
    """Mutable holder for the user the optional-auth dependency returns."""
    return {"user_id": "user-123"}


@pytest.fixture
def app(test_settings, catalog, cache, log_repo, session_store, current_user):
    app = create_app(settings=test_settings)

    async def optional_user() -> Optional[str]:
        return current_user["user_id"]

    override_dependency(app, deps.get_settings, test_settings)
    override_dependency(app, deps.get_workout_catalog, catalog)
    override_dependency(app, deps.get_workout_cache, cache)
    override_dependency(app, deps.get_log_repo, log_repo)
    override_dependency(app, deps.get_session_store, session_store)
    app.dependency_overrides[deps.get_optional_user] = optional_user

    yield app

    reset_overrides(app)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
