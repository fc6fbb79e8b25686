"""Tests for confirmation emails.  SMTP delivery is always patched."""
from unittest.mock import AsyncMock, patch

import pytest

from slot_booking_api.app.schemas.config import SmtpConfig
from slot_booking_api.app.schemas.registration import Registration
from slot_booking_api.app.services.notification_service import NotificationService

SMTP = {"host": "smtp.example.com", "port": 587, "user": "bookings@example.com", "pass": "pw"}


@pytest.fixture
def record():
    return Registration(
        ts="2024-01-01T08:00:00.000Z",
        name="Asha Rao",
        college="City College",
        year="2",
        contact="1111111111",
        email="asha@example.com",
        food="Veg",
        date="2024-01-01",
        cohort="Alpha",
    )


def test_build_message(record):
    smtp = SmtpConfig(**SMTP)
    message = NotificationService.build_message(record, smtp)
    assert message["To"] == "asha@example.com"
    assert message["From"] == "bookings@example.com"
    assert message["Subject"] == "Registration Confirmed - 2024-01-01 / Alpha"
    body = message.get_content()
    assert "Hello Asha Rao," in body
    assert "- Cohort: Alpha" in body
    assert "- Contact: 1111111111" in body
    assert body.rstrip().endswith("The Organising Team")


def test_build_message_with_sender_and_signature(record):
    smtp = SmtpConfig(**SMTP, **{"from": "Events <events@example.com>", "signature": "Mediquerium Team"})
    message = NotificationService.build_message(record, smtp)
    assert message["From"] == "Events <events@example.com>"
    assert "Mediquerium Team" in message.get_content()


@pytest.mark.asyncio
async def test_nothing_sent_without_smtp(write_config, record):
    write_config()
    with patch("slot_booking_api.app.services.notification_service.aiosmtplib.send", new=AsyncMock()) as send:
        await NotificationService.send_confirmation(record)
    send.assert_not_called()


@pytest.mark.asyncio
async def test_nothing_sent_with_incomplete_smtp(write_config, record):
    write_config(smtp={"host": "smtp.example.com"})
    with patch("slot_booking_api.app.services.notification_service.aiosmtplib.send", new=AsyncMock()) as send:
        await NotificationService.send_confirmation(record)
    send.assert_not_called()


@pytest.mark.asyncio
async def test_sends_when_configured(write_config, record):
    write_config(smtp=dict(SMTP, secure=True, port=465))
    with patch("slot_booking_api.app.services.notification_service.aiosmtplib.send", new=AsyncMock()) as send:
        await NotificationService.send_confirmation(record)
    assert send.await_count == 1
    message = send.call_args.args[0]
    assert message["To"] == "asha@example.com"
    kwargs = send.call_args.kwargs
    assert kwargs["hostname"] == "smtp.example.com"
    assert kwargs["port"] == 465
    assert kwargs["use_tls"] is True
    assert kwargs["username"] == "bookings@example.com"
    assert kwargs["password"] == "pw"


@pytest.mark.asyncio
async def test_delivery_failure_is_swallowed(write_config, record, caplog):
    write_config(smtp=SMTP)
    failing = AsyncMock(side_effect=OSError("connection refused"))
    with patch("slot_booking_api.app.services.notification_service.aiosmtplib.send", new=failing):
        await NotificationService.send_confirmation(record)
    assert "Email send failed" in caplog.text
