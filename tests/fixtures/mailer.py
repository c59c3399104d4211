from typing import List, Tuple

from src.app.services.mailer import DeliveryError, IMailer


class RecordingMailer(IMailer):
    """In-memory mailer that keeps every message instead of sending it"""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: List[Tuple[str, str, str]] = []

    async def send_email(self, to: str, subject: str, html_body: str) -> None:
        if self.fail:
            raise DeliveryError("SMTP server unavailable")
        self.sent.append((to, subject, html_body))
