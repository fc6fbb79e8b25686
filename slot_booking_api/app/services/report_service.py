"""
Service layer for admin reports.

Reports are read‑only projections of the ledger: the raw dump, a CSV
export filtered by date and/or cohort, and a per‑date summary of
bookings per cohort.  They read the ledger document directly and do
not take the admission lock, so a report may miss a registration that
is being written at the same moment.
"""

from __future__ import annotations

import csv
import io
from typing import Any, Dict, Iterable, List, Optional

from slot_booking_api.app.schemas.registration import Registration
from slot_booking_api.app.services.config_service import ConfigService
from slot_booking_api.app.services.ledger_service import LedgerService

CSV_HEADER = ["Timestamp", "Name", "College", "Year", "Contact", "Email", "Food", "Date", "Cohort"]
CSV_FIELDS = ["ts", "name", "college", "year", "contact", "email", "food", "date", "cohort"]


class ReportService:
    """Read‑only views over the registration ledger."""

    @classmethod
    async def dump(cls) -> Dict[str, Any]:
        """Return every record in ledger order."""
        return {
            "ok": True,
            "registrations": [record.model_dump() for record in LedgerService.load()],
        }

    @staticmethod
    def filter_records(
        records: Iterable[Registration],
        date: Optional[str] = None,
        cohort: Optional[str] = None,
    ) -> List[Registration]:
        """Keep records matching ``date`` and ``cohort``.  Empty means any."""
        return [
            record
            for record in records
            if (not date or record.date == date) and (not cohort or record.cohort == cohort)
        ]

    @staticmethod
    def to_csv(records: Iterable[Registration]) -> str:
        """Serialise records as CSV with a fixed header and CRLF rows.

        Fields containing a comma, a double quote or a line break are
        quoted and embedded quotes are doubled.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
        writer.writerow(CSV_HEADER)
        for record in records:
            writer.writerow([getattr(record, field) for field in CSV_FIELDS])
        return buffer.getvalue()

    @classmethod
    async def export_csv(cls, date: Optional[str] = None, cohort: Optional[str] = None) -> str:
        return cls.to_csv(cls.filter_records(LedgerService.load(), date=date, cohort=cohort))

    @classmethod
    async def summary(cls) -> Dict[str, Any]:
        """Per‑date booking counts.

        Covers every allowed date plus any other date that has
        bookings in the ledger (for example a date since removed from
        the configuration), sorted by date string.
        """
        config = ConfigService.get_config()
        records = LedgerService.load()
        dates = sorted(set(config.allowed_dates) | {record.date for record in records})
        rows: List[Dict[str, Any]] = []
        for date in dates:
            counts, total = LedgerService.counts_for_date(records, date, config.cohorts)
            rows.append(
                {
                    "date": date,
                    "allowed": date in config.allowed_dates,
                    "counts": counts,
                    "total": total,
                    "totalRemaining": max(0, config.per_day_limit - total),
                }
            )
        return {
            "ok": True,
            "perDayLimit": config.per_day_limit,
            "perCohortLimit": config.per_cohort_limit,
            "dates": rows,
        }
