"""
Load Profile Use Case

Loads the profile of an already authenticated user.
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ProfileResponse


class LoadProfileUseCase:
    """
    Use case for loading a user profile.

    The caller supplies the authenticated username; this use case does not
    read any request or security context itself.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str) -> Result[ProfileResponse]:
        """
        Execute load profile use case.

        Args:
            username: Username of the authenticated principal

        Returns:
            Result with ProfileResponse, or Error(USER_NOT_FOUND)
        """
        async with self.uow:
            user = await self.uow.users.get_by_username(username)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            question_count = await self.uow.questions.count_by_author(user.id)
            answer_count = await self.uow.answers.count_by_author(user.id)

            return Return.ok(
                ProfileResponse(
                    id=str(user.id),
                    username=user.username,
                    email=user.email,
                    created_at=user.created_at,
                    question_count=question_count,
                    answer_count=answer_count,
                )
            )
