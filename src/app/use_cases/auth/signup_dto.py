"""
Signup Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- SignupCommand: Input to use case (validated business intent)
- SignupResponse: Output from use case (structured result)
"""

from pydantic import BaseModel


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Created by API layer after request validation passes.
    password2 is the confirmation field and must equal password1.
    """

    username: str
    email: str
    password1: str
    password2: str


class SignupResponse(BaseModel):
    """Signup response - the created account, without credentials"""

    id: str
    username: str
    email: str
