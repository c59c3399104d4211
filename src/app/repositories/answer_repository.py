from abc import ABC, abstractmethod
from uuid import UUID


class IAnswerRepository(ABC):
    """Answer repository interface - application layer"""

    @abstractmethod
    async def count_by_author(self, author_id: UUID) -> int:
        """Count answers written by a user"""
        pass
