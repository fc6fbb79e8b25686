"""
Top‑level router for version 1 of the API.

This router aggregates the routers of each concern.  The booking pages
call the routes without a version segment (``/api/register``), so
``main`` mounts this router twice: under ``/api`` and ``/api/v1``.
"""

from fastapi import APIRouter

from .endpoints import admin, config, registrations, slots

router = APIRouter()

router.include_router(config.router, tags=["config"])
router.include_router(slots.router, tags=["slots"])
router.include_router(registrations.router, tags=["registrations"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
