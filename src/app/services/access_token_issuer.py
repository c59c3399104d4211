from abc import ABC, abstractmethod
from uuid import UUID


class IAccessTokenIssuer(ABC):
    """Issues bearer access tokens for an authenticated user - application layer"""

    @abstractmethod
    def issue(self, user_id: UUID, username: str) -> str:
        pass
