from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig
from src.app.services.access_token_issuer import IAccessTokenIssuer


def generate_jwt(user_id: UUID, username: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Generate JWT access token

    Args:
        user_id: User UUID
        username: Username, carried so handlers need no extra lookup
        expires_delta: Token lifetime, defaults to ACCESS_TOKEN_TTL_MINUTES

    Returns:
        JWT token string (HS256)
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=ApplicationConfig.ACCESS_TOKEN_TTL_MINUTES)
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "username": username,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None


class JwtAccessTokenIssuer(IAccessTokenIssuer):
    """HS256 JWT implementation of IAccessTokenIssuer"""

    def __init__(self, expires_delta: Optional[timedelta] = None):
        self.expires_delta = expires_delta

    def issue(self, user_id: UUID, username: str) -> str:
        return generate_jwt(user_id, username, self.expires_delta)
