"""
PasswordResetToken Entity

Single-use password reset capabilities.
"""

import hashlib
from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from src.domain.base import utc_now

if TYPE_CHECKING:
    from .user import User


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity - single-use password reset capability.

    Business Rules:
    - Token is SHA-256 hash of a secure random string (plain token is never stored)
    - Bound to exactly one user; a user may hold several outstanding tokens
    - Deleted on successful redemption, together with the user's other tokens
    - Rejected once expires_at has passed
    """

    __tablename__ = "password_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id")
    token_hash: str = Field(unique=True, max_length=64)  # SHA-256 output

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    user: Optional["User"] = Relationship(back_populates="password_reset_tokens")

    __table_args__ = (
        Index("idx_password_reset_user_id", "user_id"),
        Index("idx_password_reset_expires_at", "expires_at"),
    )

    @staticmethod
    def hash_token(plain_token: str) -> str:
        """SHA-256 hex digest used to store and look up a plain token"""
        return hashlib.sha256(plain_token.encode()).hexdigest()

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < now
