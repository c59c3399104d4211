"""
Question Entity

A question posted on the board.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Text
from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from src.domain.base import utc_now

if TYPE_CHECKING:
    from .answer import Answer


class Question(SQLModel, table=True):
    """Question entity - author is optional for legacy rows"""

    __tablename__ = "questions"

    id: Optional[int] = Field(default=None, primary_key=True)
    subject: str = Field(max_length=200)
    content: str = Field(sa_column=Column(Text, nullable=False))

    author_id: Optional[UUID] = Field(default=None, foreign_key="users.id", index=True)

    create_date: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    modify_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    answers: list["Answer"] = Relationship(back_populates="question")
