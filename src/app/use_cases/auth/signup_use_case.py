from src.libs.result import Error, Result, Return
from src.app.services.password_hasher import IPasswordHasher, MAX_PASSWORD_BYTES
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from .signup_dto import SignupCommand, SignupResponse


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (validated business intent)
    - Output: Result[SignupResponse] (structured response)

    Business Logic:
    1. Reject mismatched or over-long passwords before touching the store
    2. Reject a username or email that is already registered
    3. Hash password through the password hasher
    4. Create User and commit
    """

    def __init__(self, uow: UnitOfWork, password_hasher: IPasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with username, email, password1, password2

        Returns:
            Result[SignupResponse] with the created user,
            Error(VALIDATION_ERROR) if the passwords differ or are too long,
            or Error(USER_ALREADY_EXISTS) if username or email is taken
        """
        if command.password1 != command.password2:
            return Return.err(Error("VALIDATION_ERROR", "Passwords do not match"))
        if len(command.password1.encode("utf-8")) > MAX_PASSWORD_BYTES:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Password must be at most {MAX_PASSWORD_BYTES} bytes long",
                )
            )

        async with self.uow:
            if await self.uow.users.get_by_username(command.username):
                return Return.err(Error("USER_ALREADY_EXISTS", "User is already registered"))
            if await self.uow.users.get_by_email(command.email):
                return Return.err(Error("USER_ALREADY_EXISTS", "User is already registered"))

            user = User(
                username=command.username,
                email=command.email,
                password_hash=self.password_hasher.hash(command.password1),
            )
            user = await self.uow.users.create(user)

            await self.uow.commit()

            return Return.ok(
                SignupResponse(id=str(user.id), username=user.username, email=user.email)
            )
