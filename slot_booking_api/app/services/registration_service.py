"""
Business logic for registration admission.

``RegistrationService.register`` decides whether a registration may be
admitted and, if so, appends it to the ledger.  Field checks that only
depend on the request and the configuration run first and without any
lock.  The remaining checks (duplicate booking, day capacity, cohort
capacity) and the write itself run inside one exclusive section so
that two concurrent requests can never both observe a free slot and
both be admitted past a cap.  The section is global (not per date or
per cohort) and is also taken by the bulk reset.

Rejections are returned as ``RegistrationResult`` values with
``success=False``.  Only storage failures escape as exceptions.
"""

import asyncio
import logging
import re
import weakref
from datetime import datetime, timezone
from typing import Dict, List, Optional

from slot_booking_api.app.schemas.config import BookingConfig
from slot_booking_api.app.schemas.registration import (
    Registration,
    RegistrationRequest,
    RegistrationResult,
    SlotAvailability,
)
from slot_booking_api.app.services.config_service import ConfigService
from slot_booking_api.app.services.ledger_service import LedgerService

CONTACT_PATTERN = re.compile(r"[0-9]{10}")

MSG_INVALID_FIELDS = "Missing/invalid fields."
MSG_DATE_NOT_ALLOWED = "Selected date is not allowed."
MSG_INVALID_COHORT = "Invalid cohort."
MSG_DUPLICATE = "You already have a booking for this date."
MSG_DAY_FULL = "All {limit} slots are booked for this date."
MSG_COHORT_FULL = "{cohort} cohort is full for this date."
MSG_CONFIRMED = "Booking confirmed."
MSG_OUTSIDE_WINDOW = "Date outside allowed window."


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RegistrationService:
    """Serialised admission of registrations against the ledger."""

    # asyncio.Lock binds to the loop that first waits on it, so one lock
    # is kept per running loop.  The server runs a single loop.
    _locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = weakref.WeakKeyDictionary()

    @classmethod
    def _lock(cls) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        lock = cls._locks.get(loop)
        if lock is None:
            lock = cls._locks[loop] = asyncio.Lock()
        return lock

    @classmethod
    async def register(cls, request: RegistrationRequest) -> RegistrationResult:
        """Validate and admit a registration.

        Checks run in a fixed order and the first failure is returned:
        incomplete fields, date not open, unknown cohort, then (inside
        the lock) duplicate ``(contact, date)``, day full, cohort full.

        Raises
        ------
        OSError
            If the ledger cannot be written.  The lock is released and
            the ledger on disk is unchanged.
        """
        logger = logging.getLogger(__name__)
        config = ConfigService.get_config()
        failure = cls._check_fields(request, config)
        if failure:
            logger.info(
                "Registration rejected (contact=%s, date=%s): %s",
                request.contact, request.date, failure,
            )
            return RegistrationResult(success=False, message=failure)

        async with cls._lock():
            result = cls._admit(request, config)
        if result.success:
            logger.info(
                "Registration admitted: contact=%s date=%s cohort=%s",
                request.contact, request.date, request.cohort,
            )
        else:
            logger.info(
                "Registration rejected (contact=%s, date=%s): %s",
                request.contact, request.date, result.message,
            )
        return result

    @classmethod
    async def reset(cls) -> None:
        """Replace the ledger with an empty one.

        Runs inside the admission lock so it cannot interleave with an
        in‑flight registration.  Whether reset is allowed at all is
        decided by the caller.
        """
        async with cls._lock():
            LedgerService.save([])
        logging.getLogger(__name__).warning("Ledger reset: all registrations cleared")

    @classmethod
    async def get_availability(cls, date: str) -> SlotAvailability:
        """Report bookings and remaining capacity for ``date``.

        Dates outside the allowed set report zero everywhere without
        reading the ledger.  This is a lock‑free read.
        """
        config = ConfigService.get_config()
        if date not in config.allowed_dates:
            return SlotAvailability(
                message=MSG_OUTSIDE_WINDOW,
                counts={cohort: 0 for cohort in config.cohorts},
                total_remaining=0,
            )
        counts, total = LedgerService.counts_for_date(LedgerService.load(), date, config.cohorts)
        return SlotAvailability(
            counts=counts,
            total=total,
            total_remaining=max(0, config.per_day_limit - total),
            remaining_by_cohort=cls._remaining_by_cohort(counts, config),
            per_cohort_limit=config.per_cohort_limit,
            per_day_limit=config.per_day_limit,
        )

    @staticmethod
    def _check_fields(request: RegistrationRequest, config: BookingConfig) -> Optional[str]:
        fields: List[str] = [
            request.name,
            request.college,
            request.year,
            request.contact,
            request.email,
            request.food,
            request.date,
            request.cohort,
        ]
        if not all(fields) or not CONTACT_PATTERN.fullmatch(request.contact):
            return MSG_INVALID_FIELDS
        if request.date not in config.allowed_dates:
            return MSG_DATE_NOT_ALLOWED
        if request.cohort not in config.cohorts:
            return MSG_INVALID_COHORT
        return None

    @classmethod
    def _admit(cls, request: RegistrationRequest, config: BookingConfig) -> RegistrationResult:
        # Must only be called while holding the lock.
        records = LedgerService.load()

        if any(r.contact == request.contact and r.date == request.date for r in records):
            return RegistrationResult(success=False, message=MSG_DUPLICATE)

        counts, total = LedgerService.counts_for_date(records, request.date, config.cohorts)
        if total >= config.per_day_limit:
            return RegistrationResult(
                success=False,
                message=MSG_DAY_FULL.format(limit=config.per_day_limit),
            )
        if counts.get(request.cohort, 0) >= config.per_cohort_limit:
            return RegistrationResult(
                success=False,
                message=MSG_COHORT_FULL.format(cohort=request.cohort),
            )

        record = Registration(
            ts=_utc_timestamp(),
            name=request.name,
            college=request.college,
            year=request.year,
            contact=request.contact,
            email=request.email,
            food=request.food,
            date=request.date,
            cohort=request.cohort,
        )
        records.append(record)
        LedgerService.save(records)

        counts, total = LedgerService.counts_for_date(records, request.date, config.cohorts)
        return RegistrationResult(
            success=True,
            message=MSG_CONFIRMED,
            counts=counts,
            total_remaining=max(0, config.per_day_limit - total),
            remaining_by_cohort=cls._remaining_by_cohort(counts, config),
            record=record,
        )

    @staticmethod
    def _remaining_by_cohort(counts: Dict[str, int], config: BookingConfig) -> Dict[str, int]:
        return {
            cohort: max(0, config.per_cohort_limit - counts.get(cohort, 0))
            for cohort in config.cohorts
        }
