from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.answer_repository import IAnswerRepository
from src.domain.entities import Answer


class AnswerRepository(IAnswerRepository):
    """Answer repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def count_by_author(self, author_id: UUID) -> int:
        """Count answers written by a user"""
        stmt = select(func.count()).select_from(Answer).where(Answer.author_id == author_id)
        result = await self.session.exec(stmt)
        return result.one()
