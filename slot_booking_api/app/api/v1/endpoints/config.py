"""
Public configuration endpoint for API v1.

Booking pages call this route to build their forms: the cohort list,
the capacity limits and the dates open for booking.  Secrets from the
configuration document (admin password, SMTP credentials) are never
returned.
"""

from fastapi import APIRouter

from slot_booking_api.app.schemas.config import PublicConfig
from slot_booking_api.app.services.config_service import ConfigService


router = APIRouter()


@router.get("/config", response_model=PublicConfig)
async def get_config() -> PublicConfig:
    """Return cohorts, ``perDayLimit``, ``perCohortLimit`` and ``allowedDates``."""
    return ConfigService.get_public_config()
