"""
Login Use Case

Checks credentials and issues a JWT access token.
"""

from src.libs.result import Error, Result, Return
from src.app.services.access_token_issuer import IAccessTokenIssuer
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from .dtos import LoginResponse


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Same error for unknown username and wrong password
    - A hash is computed for unknown usernames too, so response time
      does not reveal whether the account exists
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        token_issuer: IAccessTokenIssuer,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer

    async def execute(self, username: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            username: Username
            password: Plain text password

        Returns:
            Result with LoginResponse containing the access token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_username(username)

            if user is None:
                self.password_hasher.hash(password)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid username or password")
                )

            if not self.password_hasher.matches(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid username or password")
                )

            access_token = self.token_issuer.issue(user.id, user.username)

            return Return.ok(LoginResponse(access_token=access_token))
