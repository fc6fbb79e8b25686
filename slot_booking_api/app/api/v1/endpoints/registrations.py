"""
Registration endpoints for API v1.

``POST /register`` admits or rejects a registration.  Business
outcomes (invalid fields, date closed, cohort or day full, duplicate
booking) are reported with HTTP 200 and ``success: false``; only a
storage failure produces an error status, a 500 with the same
``success``/``message`` body so booking pages can show the message.
A confirmation email is
scheduled as a background task after a successful admission.

``POST /reset`` clears the ledger when the deployment allows it.
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, status
from fastapi.responses import JSONResponse

from slot_booking_api.app.core.security import require_reset_enabled
from slot_booking_api.app.schemas.registration import RegistrationRequest, RegistrationResult
from slot_booking_api.app.services.notification_service import NotificationService
from slot_booking_api.app.services.registration_service import RegistrationService


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/register",
    response_model=RegistrationResult,
    response_model_exclude_none=True,
)
async def register(
    background_tasks: BackgroundTasks,
    payload: RegistrationRequest | None = None,
) -> RegistrationResult:
    """Book a slot for a participant.

    The body carries ``name``, ``college``, ``year``, ``contact`` (10
    digits), ``email``, ``food``, ``date`` and ``cohort``.  On success
    the response includes the cohort counts for the date, the remaining
    day capacity and the remaining capacity per cohort.
    """
    try:
        result = await RegistrationService.register(payload or RegistrationRequest())
    except OSError:
        logger.exception("Register error: could not persist the ledger")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "Server error."},
        )
    if result.success and result.record is not None:
        background_tasks.add_task(NotificationService.send_confirmation, result.record)
    return result


@router.post("/reset", dependencies=[Depends(require_reset_enabled)])
async def reset() -> dict:
    """Delete every registration.  Refused with 403 unless ``ALLOW_RESET`` is set."""
    try:
        await RegistrationService.reset()
    except OSError:
        logger.exception("Reset error: could not persist the ledger")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"ok": False, "message": "Server error."},
        )
    return {"ok": True, "message": "All registrations cleared."}
