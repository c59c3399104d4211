"""
Confirm Password Reset Use Case

Redeems a reset token exactly once and replaces the user's password.
"""

import logging

from src.libs.result import Error, Result, Return
from src.app.services.password_hasher import IPasswordHasher, MAX_PASSWORD_BYTES
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import PasswordResetToken
from .dtos import ConfirmPasswordResetCommand, ConfirmPasswordResetResponse

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - password1 and password2 must match, meet the minimum length and fit
      in MAX_PASSWORD_BYTES of UTF-8; checked before any store access
    - Token is looked up by the SHA-256 hash of the submitted value
    - Expired tokens are rejected
    - The token row is removed with a conditional delete; zero affected rows
      means another request redeemed it first and this one fails
    - On success every other outstanding token of the user is removed too
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        password_min_length: int = 6,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.password_min_length = password_min_length

    def _validate_password(self, command: ConfirmPasswordResetCommand) -> Result[None]:
        if command.password1 != command.password2:
            return Return.err(Error("VALIDATION_ERROR", "Passwords do not match"))

        if len(command.password1) < self.password_min_length:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Password must be at least {self.password_min_length} characters long",
                )
            )

        if len(command.password1.encode("utf-8")) > MAX_PASSWORD_BYTES:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Password must be at most {MAX_PASSWORD_BYTES} bytes long",
                )
            )

        return Return.ok(None)

    async def execute(
        self, command: ConfirmPasswordResetCommand
    ) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            command: Plain token from the email plus the new password twice

        Returns:
            Result with confirmation status, or Error

        Errors:
            - VALIDATION_ERROR: Passwords differ, are too short or too long
            - INVALID_TOKEN: Token unknown or already redeemed
            - TOKEN_EXPIRED: Token has expired
            - USER_NOT_FOUND: Token owner no longer exists
        """
        password_validation = self._validate_password(command)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            token_hash = PasswordResetToken.hash_token(command.token)
            reset_token = await self.uow.password_reset_tokens.get_by_token_hash(token_hash)

            if reset_token is None:
                return Return.err(
                    Error("INVALID_TOKEN", "Invalid password reset token")
                )

            if reset_token.is_expired(utc_now()):
                return Return.err(
                    Error("TOKEN_EXPIRED", "Password reset token has expired")
                )

            user = await self.uow.users.get_by_id(reset_token.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            # Uncommitted work is rolled back when the unit of work exits
            if not await self.uow.password_reset_tokens.delete(reset_token):
                return Return.err(
                    Error("INVALID_TOKEN", "Invalid password reset token")
                )

            user.password_hash = self.password_hasher.hash(command.password1)
            await self.uow.users.update(user)

            siblings_removed = await self.uow.password_reset_tokens.delete_all_by_user_id(user.id)

            await self.uow.commit()

            logger.info(
                f"Password reset for user {user.id} "
                f"(token {reset_token.id}, {siblings_removed} other tokens removed)"
            )

            return Return.ok(
                ConfirmPasswordResetResponse(
                    status="success",
                    message="Password has been reset successfully",
                )
            )
