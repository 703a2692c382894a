"""
Folio Backend - Mail Service (Notifier)
========================================

What:  Sends transactional email over SMTP.
How:   Builds an `email.message.EmailMessage` and delivers it with aiosmtplib
       (STARTTLS on port 587 by default, Gmail-compatible).
Who:   Used only by ContactService to notify the site owner of a submission.

Failure handling:
    Any SMTP or connection failure becomes NotificationError (→ 500).
    Nothing is retried.
"""

import logging
from email.message import EmailMessage

import aiosmtplib

from app.config import settings
from app.exceptions import NotificationError

logger = logging.getLogger(__name__)


class MailService:
    async def send(self, from_address: str, to_address: str, subject: str, body: str) -> None:
        """
        Deliver one plain-text email.

        Raises:
            NotificationError: no recipient configured, or delivery failed
        """
        if not to_address:
            raise NotificationError(
                message="No notification recipient is configured",
                context={"setting": "REC_EMAIL"},
            )

        message = EmailMessage()
        message["From"] = from_address
        message["To"] = to_address
        message["Subject"] = subject
        message.set_content(body)

        try:
            await aiosmtplib.send(
                message,
                hostname=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.email_user or None,
                password=settings.email_pass or None,
                start_tls=settings.smtp_start_tls,
            )
        except (aiosmtplib.SMTPException, OSError, ValueError) as e:
            logger.error("Email delivery to %s failed: %s", to_address, str(e))
            raise NotificationError(context={"error_type": type(e).__name__})

        logger.info("Email '%s' sent to %s", subject, to_address)


mail_service = MailService()
