"""
Confirmation emails for admitted registrations.

Delivery is best effort.  ``send_confirmation`` is scheduled after the
registration response has been produced and its outcome never changes
that response: when the ``smtp`` section of the configuration is
missing or incomplete nothing is sent, and any delivery error is
logged and dropped.  There are no retries.
"""

import logging
from email.message import EmailMessage

import aiosmtplib

from slot_booking_api.app.schemas.config import SmtpConfig
from slot_booking_api.app.schemas.registration import Registration
from slot_booking_api.app.services.config_service import ConfigService

SUBJECT_TEMPLATE = "Registration Confirmed - {date} / {cohort}"

BODY_TEMPLATE = """Hello {name},

Your registration is confirmed.

Details:
- Date: {date}
- Cohort: {cohort}
- Name: {name}
- Contact: {contact}

Please keep this email for your records.

Regards,
{signature}"""


class NotificationService:
    """Send booking confirmations over SMTP."""

    @staticmethod
    def build_message(record: Registration, smtp: SmtpConfig) -> EmailMessage:
        message = EmailMessage()
        message["From"] = smtp.sender or smtp.user
        message["To"] = record.email
        message["Subject"] = SUBJECT_TEMPLATE.format(date=record.date, cohort=record.cohort)
        message.set_content(
            BODY_TEMPLATE.format(
                name=record.name,
                date=record.date,
                cohort=record.cohort,
                contact=record.contact,
                signature=smtp.signature,
            )
        )
        return message

    @classmethod
    async def send_confirmation(cls, record: Registration) -> None:
        """Email ``record``'s participant, swallowing every failure."""
        logger = logging.getLogger(__name__)
        smtp = ConfigService.get_config().smtp
        if smtp is None or not smtp.is_configured:
            logger.debug("SMTP not configured; no confirmation for %s", record.contact)
            return
        try:
            message = cls.build_message(record, smtp)
            await aiosmtplib.send(
                message,
                hostname=smtp.host,
                port=smtp.port,
                use_tls=smtp.secure,
                username=smtp.user,
                password=smtp.password,
            )
        except Exception as e:
            logger.error("Email send failed for %s: %s", record.email, e)
            return
        logger.info("Confirmation email sent to %s (%s / %s)", record.email, record.date, record.cohort)
