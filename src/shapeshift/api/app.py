"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from shapeshift.api.routes import health, transform
from shapeshift.core.config import AppSettings
from shapeshift.core.logging import configure_logging
from shapeshift.engine.shapeshifter import Shapeshift


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings = getattr(app.state, "settings", None) or AppSettings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    if getattr(app.state, "engine", None) is None:
        app.state.engine = Shapeshift.from_settings(settings)
    yield


def create_app(settings: AppSettings | None = None, engine: Shapeshift | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Shapeshift Semantic Schema Translator",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.include_router(health.router)
    app.include_router(transform.router)
    return app
