"""
Unit tests for ConfirmPasswordResetUseCase

Tests all business logic with mocked dependencies.
"""
import hashlib
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.auth.confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from src.app.use_cases.auth.dtos import ConfirmPasswordResetCommand
from src.domain.base import utc_now
from src.domain.entities import PasswordResetToken, User

PLAIN_TOKEN = "reset_token_12345"


@pytest.fixture
def mock_uow(mock_uow):
    """Mock UnitOfWork with the repositories redemption touches"""
    mock_uow.users = MagicMock()
    mock_uow.users.get_by_id = AsyncMock()
    mock_uow.users.update = AsyncMock(side_effect=lambda user: user)

    mock_uow.password_reset_tokens = MagicMock()
    mock_uow.password_reset_tokens.get_by_token_hash = AsyncMock()
    mock_uow.password_reset_tokens.delete = AsyncMock(return_value=True)
    mock_uow.password_reset_tokens.delete_all_by_user_id = AsyncMock(return_value=0)

    return mock_uow


@pytest.fixture
def user():
    return User(
        id=uuid4(),
        username="user1",
        email="user@example.com",
        password_hash="hashed::old-password",
    )


@pytest.fixture
def reset_token(user):
    return PasswordResetToken(
        id=uuid4(),
        user_id=user.id,
        token_hash=hashlib.sha256(PLAIN_TOKEN.encode()).hexdigest(),
        expires_at=utc_now() + timedelta(minutes=30),
    )


def command(password1: str = "secret1", password2: str = "secret1", token: str = PLAIN_TOKEN):
    return ConfirmPasswordResetCommand(token=token, password1=password1, password2=password2)


@pytest.mark.asyncio
async def test_successful_redemption(mock_uow, password_hasher, user, reset_token):
    """Valid token updates the password hash and deletes the token"""
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = reset_token
    mock_uow.users.get_by_id.return_value = user

    use_case = ConfirmPasswordResetUseCase(mock_uow, password_hasher)
    result = await use_case.execute(command())

    assert result.is_ok()
    assert result.value.status == "success"

    mock_uow.password_reset_tokens.get_by_token_hash.assert_called_once_with(
        reset_token.token_hash
    )
    mock_uow.users.get_by_id.assert_called_once_with(user.id)

    updated_user = mock_uow.users.update.call_args.args[0]
    assert updated_user.password_hash == "hashed::secret1"

    mock_uow.password_reset_tokens.delete.assert_called_once_with(reset_token)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_sibling_tokens_removed_on_success(mock_uow, password_hasher, user, reset_token):
    """Other outstanding tokens of the same user stop working"""
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = reset_token
    mock_uow.users.get_by_id.return_value = user
    mock_uow.password_reset_tokens.delete_all_by_user_id.return_value = 2

    use_case = ConfirmPasswordResetUseCase(mock_uow, password_hasher)
    result = await use_case.execute(command())

    assert result.is_ok()
    mock_uow.password_reset_tokens.delete_all_by_user_id.assert_called_once_with(user.id)


@pytest.mark.asyncio
async def test_unknown_token(mock_uow, password_hasher):
    """Unknown token fails with INVALID_TOKEN and changes nothing"""
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = None

    use_case = ConfirmPasswordResetUseCase(mock_uow, password_hasher)
    result = await use_case.execute(command(token="does-not-exist"))

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_uow.users.update.assert_not_called()
    mock_uow.password_reset_tokens.delete.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_expired_token(mock_uow, password_hasher, reset_token):
    """Token past expires_at fails with TOKEN_EXPIRED"""
    reset_token.expires_at = utc_now() - timedelta(minutes=1)
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = reset_token

    use_case = ConfirmPasswordResetUseCase(mock_uow, password_hasher)
    result = await use_case.execute(command())

    assert result.is_err()
    assert result.error.code == "TOKEN_EXPIRED"
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_token_redeemed_concurrently(mock_uow, password_hasher, user, reset_token):
    """A token deleted by a concurrent redemption is reported invalid"""
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = reset_token
    mock_uow.users.get_by_id.return_value = user
    mock_uow.password_reset_tokens.delete.return_value = False

    use_case = ConfirmPasswordResetUseCase(mock_uow, password_hasher)
    result = await use_case.execute(command())

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_mismatched_confirmation_checked_before_store(mock_uow, password_hasher):
    """Mismatched passwords fail with VALIDATION_ERROR without opening the unit of work"""
    use_case = ConfirmPasswordResetUseCase(mock_uow, password_hasher)
    result = await use_case.execute(command(password1="secret1", password2="secret2"))

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.__aenter__.assert_not_called()
    mock_uow.password_reset_tokens.get_by_token_hash.assert_not_called()


@pytest.mark.asyncio
async def test_password_too_short(mock_uow, password_hasher):
    use_case = ConfirmPasswordResetUseCase(mock_uow, password_hasher, password_min_length=6)
    result = await use_case.execute(command(password1="short", password2="short"))

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.password_reset_tokens.get_by_token_hash.assert_not_called()


@pytest.mark.asyncio
async def test_user_not_found(mock_uow, password_hasher, reset_token):
    """Token whose owner is gone fails with USER_NOT_FOUND"""
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = reset_token
    mock_uow.users.get_by_id.return_value = None

    use_case = ConfirmPasswordResetUseCase(mock_uow, password_hasher)
    result = await use_case.execute(command())

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
    mock_uow.password_reset_tokens.delete.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_password_over_bcrypt_limit(mock_uow, password_hasher):
    """Length is measured in UTF-8 bytes, not characters"""
    long_password = "é" * 37  # 74 bytes
    use_case = ConfirmPasswordResetUseCase(mock_uow, password_hasher)

    result = await use_case.execute(command(password1=long_password, password2=long_password))

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.__aenter__.assert_not_called()
    password_hasher.hash.assert_not_called()


@pytest.mark.asyncio
async def test_password_at_bcrypt_limit(mock_uow, password_hasher, user, reset_token):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = reset_token
    mock_uow.users.get_by_id.return_value = user
    password = "a" * 72

    use_case = ConfirmPasswordResetUseCase(mock_uow, password_hasher)
    result = await use_case.execute(command(password1=password, password2=password))

    assert result.is_ok()
    assert user.password_hash == f"hashed::{password}"
