from abc import ABC, abstractmethod
from uuid import UUID


class IQuestionRepository(ABC):
    """Question repository interface - application layer"""

    @abstractmethod
    async def count_by_author(self, author_id: UUID) -> int:
        """Count questions written by a user"""
        pass
