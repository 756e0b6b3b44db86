"""
Application factory for the Stretch Routine API.

Run with: uvicorn backend.main:app --reload

Tests build their own instance with create_app(settings=Settings(environment="test", _env_file=None)).
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.settings import Settings, get_settings

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

    _configure_logging(settings)
    _init_sentry(settings)

    app = FastAPI(
        title="Stretch Routine API",
        description="Smart stretch routine generation from free-text intent",
        version="1.0.0",
    )

    _configure_cors(app, settings)
    _include_routers(app)

    return app


def _configure_logging(settings: Settings) -> None:
    """Configure root logging at the configured level."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
            profiles_sample_rate=0.1,
        )
        logger.info("Sentry initialized for stretch-routine-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Allow the configured client origins."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        health_router,
        routines_router,
        settings_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers
    app.include_router(routines_router)
    app.include_router(settings_router)


app = create_app()
