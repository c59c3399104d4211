"""
Request Password Reset Use Case

Issues a reset token and emails the reset link to the account owner.
"""

import logging
from urllib.parse import urlencode

from src.libs.result import Error, Result, Return
from src.app.services.mailer import DeliveryError, IMailer
from .dtos import RequestPasswordResetResponse
from .issue_password_reset_token_use_case import IssuePasswordResetTokenUseCase

logger = logging.getLogger(__name__)

RESET_EMAIL_SUBJECT = "Password reset request"
RESET_SENT_MESSAGE = "A password reset link has been sent to the email address"


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Token issuance is delegated to IssuePasswordResetTokenUseCase
    - Unknown email fails with EMAIL_NOT_FOUND, unless hide_unknown_email is
      set, in which case the response matches the success response
    - Token is committed before the email is sent; a delivery failure leaves
      it in place (no cleanup, no retry) and fails with EMAIL_DELIVERY_FAILED
    """

    def __init__(
        self,
        issue_token: IssuePasswordResetTokenUseCase,
        mailer: IMailer,
        reset_link_base: str,
        hide_unknown_email: bool = False,
    ):
        self.issue_token = issue_token
        self.mailer = mailer
        self.reset_link_base = reset_link_base
        self.hide_unknown_email = hide_unknown_email

    def build_reset_link(self, token: str) -> str:
        return f"{self.reset_link_base}?{urlencode({'token': token})}"

    @staticmethod
    def build_email_body(reset_link: str) -> str:
        return (
            "<p>To reset your password, follow the link below:</p>"
            f'<p><a href="{reset_link}">Reset password</a></p>'
            "<p>If you did not request a password reset, you can ignore this email.</p>"
        )

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: User's email address

        Returns:
            Result with reset status, or Error

        Errors:
            - EMAIL_NOT_FOUND: No account uses this email
            - EMAIL_DELIVERY_FAILED: Token stored but the email was not sent
        """
        sent = RequestPasswordResetResponse(status="sent", message=RESET_SENT_MESSAGE)

        issued = await self.issue_token.execute(email)
        if issued.is_err():
            if issued.error.code == "EMAIL_NOT_FOUND" and self.hide_unknown_email:
                return Return.ok(sent)
            return Return.err(issued.error)

        reset_link = self.build_reset_link(issued.value)
        try:
            await self.mailer.send_email(
                email, RESET_EMAIL_SUBJECT, self.build_email_body(reset_link)
            )
        except DeliveryError as e:
            logger.error(f"Password reset email to {email} failed: {e}")
            return Return.err(
                Error("EMAIL_DELIVERY_FAILED", "Failed to send the password reset email")
            )

        logger.info(f"Password reset link sent to {email}")
        return Return.ok(sent)
