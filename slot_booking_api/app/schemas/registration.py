"""
Pydantic models for registrations.

``RegistrationRequest`` is the body of ``POST /api/register``.  Every
field is optional at the schema level and coerced to a trimmed string:
a missing or blank field is a business failure reported with HTTP 200,
not a 422, so completeness is checked by ``RegistrationService``.

``Registration`` is one ledger record as stored in the ledger document.
``RegistrationResult`` and ``SlotAvailability`` are response bodies;
they use the camelCase keys the booking pages expect.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, validator


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


class RegistrationRequest(BaseModel):
    name: str = Field("", example="Asha Rao")
    college: str = Field("", example="City College")
    year: str = Field("", example="2")
    contact: str = Field("", example="9876543210", description="10 digit phone number")
    email: str = Field("", example="asha@example.com")
    food: str = Field("", example="Veg")
    date: str = Field("", example="2024-01-01")
    cohort: str = Field("", example="Alpha")

    @validator("name", "college", "year", "contact", "email", "food", "date", "cohort", pre=True)
    def coerce_text(cls, value: Any) -> str:
        return _as_text(value)


class Registration(BaseModel):
    """A single admitted registration.

    ``ts`` is the admission time in ISO‑8601 UTC.  Records loaded from
    a hand‑edited ledger are coerced field by field instead of being
    rejected, so an odd value never hides a booking from capacity
    accounting.  Keys added by hand are kept and written back.
    """

    model_config = {
        "extra": "allow",
    }

    ts: str = ""
    name: str = ""
    college: str = ""
    year: str = ""
    contact: str = ""
    email: str = ""
    food: str = ""
    date: str = ""
    cohort: str = ""

    @validator("ts", "name", "college", "year", "contact", "email", "food", "date", "cohort", pre=True)
    def coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)


class RegistrationResult(BaseModel):
    success: bool
    message: str
    counts: Optional[Dict[str, int]] = None
    total_remaining: Optional[int] = Field(None, alias="totalRemaining")
    remaining_by_cohort: Optional[Dict[str, int]] = Field(None, alias="remainingByCohort")
    # The admitted record, handed to the notifier.  Never serialised.
    record: Optional[Registration] = Field(None, exclude=True)

    model_config = {
        "populate_by_name": True,
    }


class SlotAvailability(BaseModel):
    """Response of ``GET /api/slots``."""

    ok: bool = True
    message: Optional[str] = None
    counts: Dict[str, int]
    total: Optional[int] = None
    total_remaining: int = Field(..., alias="totalRemaining")
    remaining_by_cohort: Optional[Dict[str, int]] = Field(None, alias="remainingByCohort")
    per_cohort_limit: Optional[int] = Field(None, alias="perCohortLimit")
    per_day_limit: Optional[int] = Field(None, alias="perDayLimit")

    model_config = {
        "populate_by_name": True,
    }
