"""
Use Cases

Organized by domain folder:
- auth/: Signup, login and password reset
- users/: Profile
"""

from .auth import (
    SignupUseCase,
    SignupCommand,
    SignupResponse,
    LoginUseCase,
    IssuePasswordResetTokenUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
)
from .users import (
    LoadProfileUseCase,
)

__all__ = [
    # Auth
    "SignupUseCase",
    "SignupCommand",
    "SignupResponse",
    "LoginUseCase",
    "IssuePasswordResetTokenUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # Users
    "LoadProfileUseCase",
]
