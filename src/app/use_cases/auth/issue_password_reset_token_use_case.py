"""
Issue Password Reset Token Use Case

Creates a single-use reset token for the account owning an email address.
"""

import logging
import secrets
from datetime import timedelta

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import PasswordResetToken

logger = logging.getLogger(__name__)


class IssuePasswordResetTokenUseCase:
    """
    Use case for issuing a password reset token.

    Business Rules:
    - Email lookup is an exact, case-sensitive match
    - Unknown email: no token, nothing persisted
    - Token is 32 random bytes (url-safe), only its SHA-256 hash is stored
    - Earlier outstanding tokens of the user are left untouched
    """

    def __init__(self, uow: UnitOfWork, token_ttl: timedelta = timedelta(hours=1)):
        self.uow = uow
        self.token_ttl = token_ttl

    async def execute(self, email: str) -> Result[str]:
        """
        Execute issue token use case.

        Args:
            email: Email address the reset was requested for

        Returns:
            Result with the plain token (to be delivered by email),
            or Error(EMAIL_NOT_FOUND)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(Error("EMAIL_NOT_FOUND", "Email is not registered"))

            plain_token = secrets.token_urlsafe(32)

            now = utc_now()
            reset_token = PasswordResetToken(
                user_id=user.id,
                token_hash=PasswordResetToken.hash_token(plain_token),
                created_at=now,
                expires_at=now + self.token_ttl,
            )
            reset_token = await self.uow.password_reset_tokens.create(reset_token)

            await self.uow.commit()

            logger.info(f"Password reset token {reset_token.id} issued for user {user.id}")

            return Return.ok(plain_token)
