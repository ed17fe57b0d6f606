"""User Registry API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map domain errors to 400, everything else to an opaque 500
    - Settings loaded in the lifespan before serving; a missing USER_MIN_AGE aborts startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from user_registry.api.error_handlers import register_error_handlers
from user_registry.api.routes import health, users
from user_registry.config import get_settings
from user_registry.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"User Registry API started (user_min_age={settings.user_min_age})")
    yield
    logger.info("User Registry API shutting down")


app = FastAPI(
    title="User Registry API", version="1.0.0", lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)
