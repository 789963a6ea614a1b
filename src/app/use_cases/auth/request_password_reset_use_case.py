"""
Request Password Reset Use Case

Handles generating and sending password reset tokens.
"""

import hashlib
import logging
import secrets
from datetime import timedelta

from src.libs.result import Error, Result, Return
from src.app.services.notification_sender import INotificationSender
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken
from src.domain.exceptions import NotificationError
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)

DEFAULT_RESET_TOKEN_TTL = timedelta(hours=1)


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Generate cryptographically secure token (32 random bytes)
    - Hash token with SHA-256 before storing
    - Token expires in 1 hour
    - No email enumeration (same response for valid/invalid emails)
    - Token is committed before delivery and kept if delivery fails
    - Delivery failure is reported as NOTIFICATION_FAILED
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notification_sender: INotificationSender,
        frontend_url: str,
        token_ttl: timedelta = DEFAULT_RESET_TOKEN_TTL,
    ):
        self.uow = uow
        self.notification_sender = notification_sender
        self.frontend_url = frontend_url.rstrip("/")
        self.token_ttl = token_ttl

    def _sent_response(self) -> RequestPasswordResetResponse:
        return RequestPasswordResetResponse(
            status="sent",
            message="If your email is registered, you will receive instructions to reset your password",
        )

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: User's email address

        Returns:
            Result with reset status, or NOTIFICATION_FAILED

        Note:
            For security (no email enumeration), always returns success
            even if email doesn't exist. However, only generates token
            if email exists.
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                logger.info("Password reset requested for unknown email")
                return Return.ok(self._sent_response())

            # The plain token only ever leaves through the notification
            reset_token = secrets.token_urlsafe(32)
            token_hash = hashlib.sha256(reset_token.encode()).hexdigest()

            now = utcnow()
            password_reset_token = PasswordResetToken(
                user_id=user.id,
                token_hash=token_hash,
                used=False,
                created_at=now,
                expires_at=now + self.token_ttl,
            )
            await self.uow.password_reset_tokens.create(password_reset_token)

            user_id = user.id
            user_email = user.email
            first_name = user.first_name

            await self.uow.commit()

        reset_link = f"{self.frontend_url}/reset-password/{reset_token}"

        try:
            delivered = await self.notification_sender.send_password_reset(
                user_email, reset_link, first_name
            )
        except NotificationError:
            logger.exception(f"Password reset notification for user {user_id} failed")
            delivered = False

        if not delivered:
            return Return.err(
                Error("NOTIFICATION_FAILED", "Failed to send password reset email")
            )

        logger.info(f"Password reset token issued for user {user_id}")
        return Return.ok(self._sent_response())
