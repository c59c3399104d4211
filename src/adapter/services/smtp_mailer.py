"""
SMTP Mailer

Sends transactional email through aiosmtplib.
"""

import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

import aiosmtplib

from src.app.services.mailer import DeliveryError, IMailer

logger = logging.getLogger(__name__)


class SmtpMailer(IMailer):
    """
    aiosmtplib implementation of IMailer.

    Usage:
        mailer = SmtpMailer(host="smtp.example.com", port=587, from_email="no-reply@example.com")
        await mailer.send_email("user@example.com", "Subject", "<p>Hello</p>")
    """

    def __init__(
        self,
        host: str,
        port: int,
        from_email: str,
        from_name: str = "",
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = True,
        timeout: float = 10,
    ):
        self.host = host
        self.port = port
        self.from_email = from_email
        self.from_name = from_name
        self.username = username or None
        self.password = password or None
        self.use_tls = use_tls
        self.timeout = timeout

    def _create_message(self, to: str, subject: str, html_body: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = (
            f"{self.from_name} <{self.from_email}>" if self.from_name else self.from_email
        )
        msg["To"] = to
        msg.attach(MIMEText(html_body, "html", "utf-8"))
        return msg

    async def send_email(self, to: str, subject: str, html_body: str) -> None:
        """
        Send an HTML email.

        Args:
            to: Recipient email address
            subject: Email subject
            html_body: HTML body content

        Raises:
            DeliveryError: If the SMTP exchange fails
        """
        msg = self._create_message(to, subject, html_body)

        try:
            logger.info(f"Sending email to {to}: {subject}")
            await aiosmtplib.send(
                msg,
                hostname=self.host,
                port=self.port,
                start_tls=self.use_tls,
                username=self.username,
                password=self.password,
                timeout=self.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {to}: {e}")
            raise DeliveryError(f"Failed to send email: {e}") from e

        logger.info(f"Email sent successfully to {to}")
