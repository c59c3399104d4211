"""
Board Domain Entities

Each entity in its own file.
"""

from .user import User
from .question import Question
from .answer import Answer, AnswerVoter
from .password_reset_token import PasswordResetToken

__all__ = [
    "User",
    "Question",
    "Answer",
    "AnswerVoter",
    "PasswordResetToken",
]
