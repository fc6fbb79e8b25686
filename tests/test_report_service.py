"""Tests for admin reports."""
import csv
import io

import pytest

from slot_booking_api.app.schemas.registration import Registration
from slot_booking_api.app.services.ledger_service import LedgerService
from slot_booking_api.app.services.report_service import ReportService


def _record(contact, college="City College", date="2024-01-01", cohort="Alpha", name="Asha"):
    return Registration(
        ts="2024-01-01T08:00:00.000Z",
        name=name,
        college=college,
        year="2",
        contact=contact,
        email="a@example.com",
        food="Veg",
        date=date,
        cohort=cohort,
    )


def test_csv_header_and_line_endings():
    content = ReportService.to_csv([_record("1111111111")])
    lines = content.split("\r\n")
    assert lines[0] == "Timestamp,Name,College,Year,Contact,Email,Food,Date,Cohort"
    assert lines[1] == "2024-01-01T08:00:00.000Z,Asha,City College,2,1111111111,a@example.com,Veg,2024-01-01,Alpha"
    assert content.endswith("\r\n")


def test_csv_quotes_special_characters():
    content = ReportService.to_csv([_record("1111111111", college="Arts, Science", name='Asha "AR" Rao')])
    row = content.split("\r\n")[1]
    assert '"Arts, Science"' in row
    assert '"Asha ""AR"" Rao"' in row


def test_csv_round_trip_through_reader():
    records = [
        _record("1111111111", college="Arts, Science"),
        _record("2222222222", college="Line\nBreak"),
    ]
    rows = list(csv.reader(io.StringIO(ReportService.to_csv(records), newline="")))
    assert rows[1][2] == "Arts, Science"
    assert rows[2][2] == "Line\nBreak"
    assert len(rows) == 3


def test_filter_records():
    records = [
        _record("1111111111", date="2024-01-01", cohort="Alpha"),
        _record("2222222222", date="2024-01-01", cohort="Beta"),
        _record("3333333333", date="2024-01-02", cohort="Alpha"),
    ]
    assert len(ReportService.filter_records(records)) == 3
    assert len(ReportService.filter_records(records, date="", cohort="")) == 3
    assert [r.contact for r in ReportService.filter_records(records, date="2024-01-01")] == [
        "1111111111",
        "2222222222",
    ]
    assert [r.contact for r in ReportService.filter_records(records, cohort="Alpha")] == [
        "1111111111",
        "3333333333",
    ]
    assert [r.contact for r in ReportService.filter_records(records, date="2024-01-02", cohort="Alpha")] == [
        "3333333333",
    ]


@pytest.mark.asyncio
async def test_dump_keeps_ledger_order():
    LedgerService.save([_record("2222222222"), _record("1111111111")])
    dump = await ReportService.dump()
    assert dump["ok"] is True
    assert [r["contact"] for r in dump["registrations"]] == ["2222222222", "1111111111"]
    assert "ts" in dump["registrations"][0]


@pytest.mark.asyncio
async def test_summary_covers_allowed_and_booked_dates(write_config):
    write_config(allowedDates=["2024-01-02", "2024-01-01"], perDayLimit=4)
    LedgerService.save(
        [
            _record("1111111111", date="2024-01-01", cohort="Alpha"),
            _record("2222222222", date="2024-01-01", cohort="Beta"),
            _record("3333333333", date="2023-12-31", cohort="Alpha"),
        ]
    )
    summary = await ReportService.summary()
    assert summary["perDayLimit"] == 4
    dates = {row["date"]: row for row in summary["dates"]}
    assert [row["date"] for row in summary["dates"]] == ["2023-12-31", "2024-01-01", "2024-01-02"]
    assert dates["2024-01-01"]["counts"] == {"Alpha": 1, "Beta": 1}
    assert dates["2024-01-01"]["totalRemaining"] == 2
    assert dates["2024-01-02"]["total"] == 0
    assert dates["2023-12-31"]["allowed"] is False
