"""
Authentication Use Case DTOs (Data Transfer Objects)

Command and Response classes for login and password reset.
"""

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class ConfirmPasswordResetCommand(BaseModel):
    """Redeem a reset token; password2 confirms password1"""

    token: str
    password1: str
    password2: str


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for user login use case"""

    access_token: str
    token_type: str = "bearer"


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    status: str
    message: str


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    status: str
    message: str
