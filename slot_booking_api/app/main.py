"""
Main entrypoint for the Slot Booking API.

This module assembles the FastAPI application, sets up logging,
includes the versioned router and, when present, serves the public
pages.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn slot_booking_api.app.main:app --port 3000
"""

import logging
import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .core.config import settings
from .core.logging_config import setup_logging
from .core.storage import resolve_path
from .api.v1.router import router as v1_router


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Routes are mounted under ``/api`` (used by the booking pages) and
    ``/api/v1``.  The static directory is mounted last, at ``/``, so it
    never shadows an API route.
    """
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.include_router(v1_router, prefix="/api")
    app.include_router(v1_router, prefix="/api/v1")

    static_dir = resolve_path(settings.static_dir)
    if os.path.isdir(static_dir):
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.info("Static directory %s not found; serving the API only", static_dir)

    logger.info(
        "Ledger: %s, configuration: %s, reset %s",
        resolve_path(settings.data_file),
        resolve_path(settings.config_file),
        "enabled" if settings.allow_reset else "disabled",
    )
    return app


app = create_app()
