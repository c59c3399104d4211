import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def password_hasher():
    """Deterministic stand-in for the bcrypt hasher"""
    hasher = MagicMock()
    hasher.hash.side_effect = lambda plaintext: f"hashed::{plaintext}"
    hasher.matches.side_effect = lambda plaintext, hashed: hashed == f"hashed::{plaintext}"
    return hasher
