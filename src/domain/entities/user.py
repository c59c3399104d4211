"""
User Entity

Represents a registered member of the question/answer board.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from src.domain.base import utc_now

if TYPE_CHECKING:
    from .password_reset_token import PasswordResetToken


class User(SQLModel, table=True):
    """
    User entity - a registered member.

    Business Rules:
    - Username must be unique across all users
    - Email must be unique across all users
    - Password stored as bcrypt hash, never in plain text
    - Only the password hash is mutated after signup (password reset)
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=25)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    password_reset_tokens: list["PasswordResetToken"] = Relationship(
        back_populates="user"
    )
