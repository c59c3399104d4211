"""
Answer Entity

An answer to a question, with the set of users who voted for it.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Text
from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from src.domain.base import utc_now

if TYPE_CHECKING:
    from .question import Question
    from .user import User


class AnswerVoter(SQLModel, table=True):
    """Association table for the answer/voter many-to-many relation"""

    __tablename__ = "answer_voters"

    answer_id: int = Field(foreign_key="answers.id", primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", primary_key=True)


class Answer(SQLModel, table=True):
    """Answer entity - belongs to one question, voted by many users"""

    __tablename__ = "answers"

    id: Optional[int] = Field(default=None, primary_key=True)
    content: str = Field(sa_column=Column(Text, nullable=False))

    question_id: int = Field(foreign_key="questions.id", index=True)
    author_id: Optional[UUID] = Field(default=None, foreign_key="users.id", index=True)

    create_date: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    modify_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    question: Optional["Question"] = Relationship(back_populates="answers")
    voters: list["User"] = Relationship(link_model=AnswerVoter)
