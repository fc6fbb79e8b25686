"""
Admin endpoints for API v1.

All routes require the ``X-Admin-Password`` header to match the
``adminPassword`` of the configuration document.  They expose the raw
ledger, a filtered CSV export and a per‑date summary.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from slot_booking_api.app.core.security import require_admin
from slot_booking_api.app.services.report_service import ReportService


router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/data", response_model=Dict[str, Any])
async def get_data() -> Dict[str, Any]:
    """Return the full ledger as ``{"ok": true, "registrations": [...]}``."""
    return await ReportService.dump()


@router.get("/csv")
async def get_csv(
    date: Optional[str] = Query(None, description="Only this date"),
    cohort: Optional[str] = Query(None, description="Only this cohort"),
) -> Response:
    """Download registrations as ``registrations.csv``.

    Both filters are optional and match exactly.
    """
    content = await ReportService.export_csv(date=date, cohort=cohort)
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=registrations.csv"},
    )


@router.get("/summary", response_model=Dict[str, Any])
async def get_summary() -> Dict[str, Any]:
    """Bookings per cohort for every allowed or booked date."""
    return await ReportService.summary()
