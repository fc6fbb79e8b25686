"""
Business logic for the registration ledger.

The ledger is the ordered list of admitted registrations, persisted as
the JSON document ``{"registrations": [...]}``.  It is loaded and saved
as a whole.  ``LedgerService`` does not serialise access on its own:
callers that read, decide and write (admission, reset) must do so
inside ``RegistrationService``'s lock.  Admin reports read it without
the lock and may see a slightly stale snapshot.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from slot_booking_api.app.core.config import settings
from slot_booking_api.app.core.storage import load_json, save_json
from slot_booking_api.app.schemas.registration import Registration


class LedgerService:
    """Load, save and count ledger records."""

    @classmethod
    def load(cls) -> List[Registration]:
        """Return all records in insertion order.

        An absent or unreadable document, or one without a
        ``registrations`` list, is an empty ledger.  Entries that are
        not objects are skipped.
        """
        logger = logging.getLogger(__name__)
        data = load_json(settings.data_file, {"registrations": []})
        rows = data.get("registrations") if isinstance(data, dict) else None
        if not isinstance(rows, list):
            if data:
                logger.warning("Ledger document has no registrations list; treating it as empty")
            return []
        records: List[Registration] = []
        for index, row in enumerate(rows):
            if not isinstance(row, dict):
                logger.warning("Skipping malformed ledger entry at position %s", index)
                continue
            records.append(Registration.model_validate(row))
        return records

    @classmethod
    def save(cls, records: Iterable[Registration]) -> None:
        """Replace the ``registrations`` list of the ledger document.

        Other top‑level keys of the document are written back
        unchanged.

        Raises
        ------
        OSError
            If the document cannot be written.  The previous document
            is left in place.
        """
        document = load_json(settings.data_file, {})
        if not isinstance(document, dict):
            document = {}
        document["registrations"] = [record.model_dump() for record in records]
        save_json(settings.data_file, document)

    @staticmethod
    def counts_for_date(
        records: Iterable[Registration],
        date: str,
        cohorts: List[str],
    ) -> Tuple[Dict[str, int], int]:
        """Tally records for ``date`` per cohort and overall.

        Every configured cohort appears in the result, with zero when
        it has no bookings.  Records whose cohort is no longer
        configured do not count towards the day total.
        """
        counts: Dict[str, int] = {cohort: 0 for cohort in cohorts}
        total = 0
        for record in records:
            if record.date == date and record.cohort in counts:
                counts[record.cohort] += 1
                total += 1
        return counts, total
