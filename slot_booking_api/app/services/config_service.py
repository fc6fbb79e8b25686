"""
Service layer for the booking configuration.

The configuration document (``CONFIG_FILE``, ``config.json`` by
default) holds the tunables of an event: cohort names, per‑day and
per‑cohort limits, the dates open for booking, the admin password and
the SMTP settings.  It is read fresh on every call so operators can
edit it while the service is running.  Missing or malformed fields fall
back to their defaults one by one; a broken document never prevents
the service from answering.
"""

import logging
import math
from typing import Any, Dict, List, Optional

from slot_booking_api.app.core.config import settings
from slot_booking_api.app.core.storage import load_json
from slot_booking_api.app.schemas.config import BookingConfig, PublicConfig, SmtpConfig

DEFAULT_COHORTS = ["Alpha", "Beta", "Gamma"]
DEFAULT_PER_DAY_LIMIT = 30
DEFAULT_PER_COHORT_LIMIT = 10


class ConfigService:
    """Read‑through access to the configuration document."""

    @classmethod
    def get_config(cls) -> BookingConfig:
        """Load the configuration, substituting defaults where needed."""
        raw = load_json(settings.config_file, {})
        if not isinstance(raw, dict):
            logging.getLogger(__name__).warning("Configuration document is not an object; using defaults")
            raw = {}
        return BookingConfig(
            cohorts=cls._string_list(raw.get("cohorts"), DEFAULT_COHORTS, allow_empty=False),
            per_day_limit=cls._number(raw.get("perDayLimit"), DEFAULT_PER_DAY_LIMIT),
            per_cohort_limit=cls._number(raw.get("perCohortLimit"), DEFAULT_PER_COHORT_LIMIT),
            allowed_dates=cls._string_list(raw.get("allowedDates"), [], allow_empty=True),
            admin_password=str(raw.get("adminPassword") or ""),
            smtp=cls._smtp(raw.get("smtp")),
        )

    @classmethod
    def get_public_config(cls) -> PublicConfig:
        """Return the part of the configuration anonymous clients may see."""
        config = cls.get_config()
        return PublicConfig(
            cohorts=config.cohorts,
            per_day_limit=config.per_day_limit,
            per_cohort_limit=config.per_cohort_limit,
            allowed_dates=config.allowed_dates,
        )

    @staticmethod
    def _string_list(value: Any, default: List[str], allow_empty: bool) -> List[str]:
        if not isinstance(value, list):
            return list(default)
        if not value and not allow_empty:
            return list(default)
        return [str(item) for item in value]

    @staticmethod
    def _number(value: Any, default: int) -> int:
        # bool is a subclass of int but "perDayLimit": true is not a limit
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return default
        if isinstance(value, float) and not math.isfinite(value):
            return default
        return int(value)

    @staticmethod
    def _smtp(value: Any) -> Optional[SmtpConfig]:
        if not isinstance(value, dict):
            return None
        data: Dict[str, Any] = {
            "host": str(value.get("host") or ""),
            "user": str(value.get("user") or ""),
            "pass": str(value.get("pass") or ""),
            "from": str(value.get("from") or ""),
            "secure": bool(value.get("secure")),
        }
        port = value.get("port")
        if isinstance(port, str) and port.strip().isdecimal():
            port = int(port.strip())
        if isinstance(port, int) and not isinstance(port, bool) and port > 0:
            data["port"] = port
        if value.get("signature"):
            data["signature"] = str(value["signature"])
        return SmtpConfig(**data)
