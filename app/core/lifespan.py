"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (Firebase clients,
telemetry).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.firebase import init_firebase
from app.shared.telemetry.telemetry import setup_telemetry, shutdown_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: telemetry (if enabled), Firebase clients (None without
    credentials). Shutdown order: Firebase HTTP pool close, telemetry shutdown.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.telemetry_enabled:
        setup_telemetry(app, settings)

    app.state.firebase = init_firebase(settings)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "firebase", None) is not None:
        await app.state.firebase.aclose()
        app.state.firebase = None
        logger.info("Firebase HTTP client closed")

    shutdown_telemetry()
