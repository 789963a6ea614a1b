"""
Confirm Password Reset Use Case

Handles password reset confirmation with secure token validation.
"""

import hashlib
import logging

from src.libs.result import Error, Result, Return
from src.app.services.credentials import hash_password, validate_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import ConfirmPasswordResetResponse

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token is validated by hashing and comparing with stored hash
    - Unknown, used and expired tokens all give the same INVALID_TOKEN error
    - New password must meet complexity requirements
    - Password is rehashed with bcrypt
    - Password update and marking the token used commit together or not at all
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _invalid_token(self) -> Error:
        return Error("INVALID_TOKEN", "Invalid or expired password reset token")

    async def execute(self, token: str, new_password: str) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Password reset token (plain text from email)
            new_password: New password to set

        Returns:
            Result with confirmation status, or Error

        Errors:
            - INVALID_TOKEN: Token not found, already used or expired
            - INVALID_PASSWORD: Password does not meet complexity requirements
        """
        async with self.uow:
            password_validation = validate_password(new_password)
            if password_validation.is_err():
                return Return.err(password_validation.error)

            # Hash the submitted token with SHA-256 to find it in database
            token_hash = hashlib.sha256(token.encode()).hexdigest()

            reset_token = await self.uow.password_reset_tokens.get_active_by_token_hash(
                token_hash, utcnow()
            )
            if reset_token is None:
                return Return.err(self._invalid_token())

            user = await self.uow.users.get_by_id(reset_token.user_id)
            if user is None:
                return Return.err(self._invalid_token())

            user.password_hash = hash_password(new_password)
            await self.uow.users.update(user)

            # Losing a race with a concurrent confirmation discards the password change
            if not await self.uow.password_reset_tokens.mark_used(reset_token.id):
                await self.uow.rollback()
                return Return.err(self._invalid_token())

            # Both writes land in the same transaction
            await self.uow.commit()

            logger.info(f"Password reset completed for user {user.id}")

            return Return.ok(
                ConfirmPasswordResetResponse(
                    status="success",
                    message="Password has been reset successfully",
                )
            )
