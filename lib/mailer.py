# =============================================================================
# lib/mailer.py - Transactional Email
# =============================================================================
# Sends one plain-text email through an SMTP relay. Each send opens its own
# connection and closes it again, whether the send worked or not.
#
# Usage:
#   from lib.mailer import Mailer
#   mailer = Mailer.from_settings(settings, logger)
#   await mailer.send(MailMessage(recipient="a@b.com", subject="Hi", body="..."))
# =============================================================================

from __future__ import annotations

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import TYPE_CHECKING

from app.exceptions import MailError
from core.models.mail import MailMessage

if TYPE_CHECKING:
    from app.config import Settings


class Mailer:
    """
    SMTP relay client.

    smtplib is blocking, so send() runs the whole conversation in a worker
    thread. Failures of any kind come back as MailError.
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        use_tls: bool = True,
        timeout: float | None = None,
        logger: logging.Logger | None = None,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Settings, logger: logging.Logger | None = None) -> Mailer:
        return cls(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.EMAIL_USER,
            password=settings.EMAIL_PASS,
            use_tls=settings.SMTP_USE_TLS,
            logger=logger,
        )

    def build_message(self, message: MailMessage) -> EmailMessage:
        email = EmailMessage()
        email["From"] = self.username
        email["To"] = message.recipient
        email["Subject"] = message.subject
        email.set_content(message.body)
        return email

    def _open(self) -> smtplib.SMTP:
        if self.timeout is None:
            return smtplib.SMTP(self.host, self.port)
        return smtplib.SMTP(self.host, self.port, timeout=self.timeout)

    def send_sync(self, message: MailMessage) -> None:
        """
        Send a message in the calling thread.

        Raises:
            MailError: On missing credentials, auth rejection, relay
                rejection or network failure
        """
        if not (self.username and self.password):
            raise MailError("EMAIL_USER and EMAIL_PASS must both be set", recipient=message.recipient)

        email = self.build_message(message)
        try:
            # The with block quits the session (or closes the socket) on every path
            with self._open() as smtp:
                if self.use_tls:
                    smtp.starttls()
                smtp.login(self.username, self.password)
                smtp.send_message(email)
        except (smtplib.SMTPException, OSError) as e:
            raise MailError(str(e), recipient=message.recipient) from e

    async def send(self, message: MailMessage) -> None:
        """
        Send one message.

        Args:
            message: Recipient, subject and body

        Raises:
            MailError: If the message could not be delivered to the relay
        """
        await asyncio.to_thread(self.send_sync, message)
        self.logger.info("Email sent successfully!", extra={"recipient": message.recipient})
