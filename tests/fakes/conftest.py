"""
Test Fixtures and Helpers for Fakes.

This module provides helper functions for overriding FastAPI dependencies
with fake implementations.

Usage:
    from tests.fakes.conftest import override_dependency, reset_overrides

    def test_something(app):
        override_dependency(app, get_workout_catalog, FakeWorkoutCatalog())
        ...
        reset_overrides(app)
"""

import inspect
from typing import Any, Callable, Type

from fastapi import FastAPI

# Type for dependency getters
DepGetter = Callable[..., Any]


def reset_overrides(app: FastAPI) -> None:
    """
    Reset all FastAPI dependency overrides.

    Call this in test setup/teardown to ensure clean state.
    """
    app.dependency_overrides.clear()


def override_dependency(
    app: FastAPI,
    getter: DepGetter,
    implementation: Any,
) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Args:
        app: Application whose dependency is overridden
        getter: The dependency getter function (e.g., get_workout_catalog)
        implementation: The fake instance, or a factory function

    Example:
        catalog = FakeWorkoutCatalog()
        override_dependency(app, get_workout_catalog, catalog)
    """
    if inspect.isfunction(implementation):
        app.dependency_overrides[getter] = implementation
    else:
        app.dependency_overrides[getter] = lambda: implementation


def override_with_fake(
    app: FastAPI,
    getter: DepGetter,
    fake_class: Type,
    **kwargs,
) -> Any:
    """
    Create and override with a fake instance.

    Returns:
        The created fake instance (for seeding data etc.)

    Example:
        catalog = override_with_fake(app, get_workout_catalog, FakeWorkoutCatalog)
        catalog.seed([...])
    """
    fake_instance = fake_class(**kwargs)
    override_dependency(app, getter, fake_instance)
    return fake_instance
