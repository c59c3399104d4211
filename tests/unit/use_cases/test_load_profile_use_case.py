"""
Unit tests for LoadProfileUseCase
"""
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.users import LoadProfileUseCase
from src.domain.base import utc_now
from src.domain.entities import User


@pytest.fixture
def mock_uow(mock_uow):
    mock_uow.users = MagicMock()
    mock_uow.users.get_by_username = AsyncMock()
    mock_uow.questions = MagicMock()
    mock_uow.questions.count_by_author = AsyncMock(return_value=3)
    mock_uow.answers = MagicMock()
    mock_uow.answers.count_by_author = AsyncMock(return_value=5)
    return mock_uow


@pytest.mark.asyncio
async def test_profile_for_supplied_username(mock_uow):
    user = User(
        id=uuid4(),
        username="user1",
        email="user@example.com",
        password_hash="hashed::secret1",
        created_at=utc_now(),
    )
    mock_uow.users.get_by_username.return_value = user

    result = await LoadProfileUseCase(mock_uow).execute("user1")

    assert result.is_ok()
    profile = result.value
    assert profile.id == str(user.id)
    assert profile.username == "user1"
    assert profile.email == "user@example.com"
    assert profile.question_count == 3
    assert profile.answer_count == 5
    mock_uow.users.get_by_username.assert_called_once_with("user1")
    mock_uow.questions.count_by_author.assert_called_once_with(user.id)


@pytest.mark.asyncio
async def test_profile_user_not_found(mock_uow):
    mock_uow.users.get_by_username.return_value = None

    result = await LoadProfileUseCase(mock_uow).execute("ghost")

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
