"""
Unit tests for ConfirmPasswordResetUseCase

Tests all business logic with mocked dependencies.
"""
import hashlib
from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.services.credentials import verify_password
from src.app.use_cases.auth.confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken, User

PLAIN_TOKEN = "plain-reset-token"
NEW_PASSWORD = "NewSecure456!"


def make_user():
    return User(
        id=uuid4(),
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        password_hash="old_hash",
        age=36,
    )


def make_token(user):
    return PasswordResetToken(
        id=uuid4(),
        user_id=user.id,
        token_hash=hashlib.sha256(PLAIN_TOKEN.encode()).hexdigest(),
        expires_at=utcnow() + timedelta(hours=1),
    )


@pytest.mark.asyncio
async def test_successful_password_reset(mock_uow):
    """Valid token changes the password and is marked used in one commit"""
    # Arrange
    user = make_user()
    token = make_token(user)
    mock_uow.password_reset_tokens.get_active_by_token_hash.return_value = token
    mock_uow.users.get_by_id.return_value = user

    use_case = ConfirmPasswordResetUseCase(mock_uow)

    # Act
    result = await use_case.execute(PLAIN_TOKEN, NEW_PASSWORD)

    # Assert
    assert result.is_ok()
    assert result.value.status == "success"
    assert result.value.message == "Password has been reset successfully"

    looked_up_hash = mock_uow.password_reset_tokens.get_active_by_token_hash.call_args[0][0]
    assert looked_up_hash == token.token_hash

    assert verify_password(NEW_PASSWORD, user.password_hash)
    mock_uow.users.update.assert_called_once_with(user)
    mock_uow.password_reset_tokens.mark_used.assert_called_once_with(token.id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_unknown_token(mock_uow):
    """Unknown, used and expired tokens all miss the active lookup"""
    mock_uow.password_reset_tokens.get_active_by_token_hash.return_value = None

    result = await ConfirmPasswordResetUseCase(mock_uow).execute("nope", NEW_PASSWORD)

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    assert result.error.message == "Invalid or expired password reset token"
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_token_for_deleted_user(mock_uow):
    user = make_user()
    mock_uow.password_reset_tokens.get_active_by_token_hash.return_value = make_token(user)
    mock_uow.users.get_by_id.return_value = None

    result = await ConfirmPasswordResetUseCase(mock_uow).execute(PLAIN_TOKEN, NEW_PASSWORD)

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_weak_password_rejected_before_lookup(mock_uow):
    result = await ConfirmPasswordResetUseCase(mock_uow).execute(PLAIN_TOKEN, "weak")

    assert result.is_err()
    assert result.error.code == "INVALID_PASSWORD"
    assert "must be at least 8 characters long" in result.error.details
    mock_uow.password_reset_tokens.get_active_by_token_hash.assert_not_called()


@pytest.mark.asyncio
async def test_lost_race_rolls_back(mock_uow):
    """If another request consumed the token first, nothing is committed"""
    user = make_user()
    mock_uow.password_reset_tokens.get_active_by_token_hash.return_value = make_token(user)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.password_reset_tokens.mark_used.return_value = False

    result = await ConfirmPasswordResetUseCase(mock_uow).execute(PLAIN_TOKEN, NEW_PASSWORD)

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_uow.rollback.assert_called_once()
    mock_uow.commit.assert_not_called()
