"""
User Use Case DTOs
"""

from datetime import datetime

from pydantic import BaseModel


class ProfileResponse(BaseModel):
    """Profile of the authenticated user"""

    id: str
    username: str
    email: str
    created_at: datetime
    question_count: int
    answer_count: int
