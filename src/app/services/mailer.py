from abc import ABC, abstractmethod


class DeliveryError(Exception):
    """Raised when an email cannot be handed to the mail transport"""

    pass


class IMailer(ABC):
    """Outgoing mail interface - application layer"""

    @abstractmethod
    async def send_email(self, to: str, subject: str, html_body: str) -> None:
        """
        Send an HTML email.

        Raises:
            DeliveryError: transport failure
        """
        pass
