"""
Slot availability endpoint for API v1.
"""

from fastapi import APIRouter, Query

from slot_booking_api.app.schemas.registration import SlotAvailability
from slot_booking_api.app.services.registration_service import RegistrationService


router = APIRouter()


@router.get(
    "/slots",
    response_model=SlotAvailability,
    response_model_exclude_none=True,
)
async def get_slots(
    date: str = Query("", description="Calendar date, e.g. 2024-01-01"),
) -> SlotAvailability:
    """Bookings per cohort and remaining capacity for a date.

    For a date that is not open for booking every count is zero and
    ``message`` explains why.
    """
    return await RegistrationService.get_availability(date.strip())
