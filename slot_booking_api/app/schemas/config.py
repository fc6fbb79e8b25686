"""
Pydantic models for the booking configuration.

``BookingConfig`` is the normalised form of the configuration document
after ``ConfigService`` has applied defaults.  The document uses
camelCase keys (``perDayLimit``, ``allowedDates``...), so fields carry
camelCase aliases while Python code uses snake_case names.
``PublicConfig`` is the subset exposed to anonymous clients.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class SmtpConfig(BaseModel):
    """Outbound mail settings from the ``smtp`` section of the document."""

    host: str = ""
    port: int = 587
    secure: bool = False
    user: str = ""
    password: str = Field("", alias="pass")
    # Optional From address; the SMTP user is used when empty.
    sender: str = Field("", alias="from")
    signature: str = "The Organising Team"

    model_config = {
        "populate_by_name": True,
    }

    @property
    def is_configured(self) -> bool:
        return bool(self.host and self.user and self.password)


class BookingConfig(BaseModel):
    cohorts: List[str] = Field(default_factory=lambda: ["Alpha", "Beta", "Gamma"])
    per_day_limit: int = Field(30, alias="perDayLimit")
    per_cohort_limit: int = Field(10, alias="perCohortLimit")
    allowed_dates: List[str] = Field(default_factory=list, alias="allowedDates")
    admin_password: str = Field("", alias="adminPassword")
    smtp: Optional[SmtpConfig] = None

    model_config = {
        "populate_by_name": True,
    }


class PublicConfig(BaseModel):
    """Configuration returned by ``GET /api/config``."""

    cohorts: List[str]
    per_day_limit: int = Field(..., alias="perDayLimit")
    per_cohort_limit: int = Field(..., alias="perCohortLimit")
    allowed_dates: List[str] = Field(..., alias="allowedDates")

    model_config = {
        "populate_by_name": True,
    }
