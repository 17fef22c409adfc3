"""
Application factory for FastAPI.

The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.settings import Settings, get_settings
from infrastructure.cache import SessionNotFoundError

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    app = FastAPI(
        title="Workout Session API",
        description="Guided workout sessions: warmup, sets, rest and logging",
        version="1.0.0",
    )
    app.state.settings = settings

    _configure_cors(app, settings)
    _register_error_handlers(app)
    _include_routers(app)
    _log_feature_flags(settings)

    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
        )
        logger.info("Sentry initialized for workout-session-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]
    trusted_origins.extend(settings.cors_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _register_error_handlers(app: FastAPI) -> None:
    """Map domain errors raised below the routers to HTTP responses."""

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found(request: Request, exc: SessionNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": f"Session {exc.session_id} not found"},
        )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import health_router, sessions_router

    # Health router (no prefix - /health at root)
    app.include_router(health_router)
    app.include_router(sessions_router)


def _log_feature_flags(settings: Settings) -> None:
    """Log the status of feature flags at startup."""
    if settings.timed_rest_enabled:
        logger.info("Timed rest between sets is enabled by default")
    else:
        logger.info("Timed rest between sets is disabled by default")

    if not settings.supabase_configured:
        logger.warning("Supabase is not configured: catalog lookups will fail and logs will not be saved")


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
