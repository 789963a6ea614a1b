"""
Login Use Case

Handles user authentication and returns a session token.
"""

import logging

from src.libs.result import Error, Result, Return
from src.app.services.credentials import dummy_verify, verify_password
from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users.dtos import UserSummary
from .dtos import LoginResponse

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Unknown email and wrong password give the same INVALID_CREDENTIALS error
    - Token carries user_id and email and expires in 10 hours
    """

    def __init__(self, uow: UnitOfWork, token_issuer: TokenIssuer):
        self.uow = uow
        self.token_issuer = token_issuer

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing user summary and token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            # Always perform one hash check even if user not found
            if user is None:
                dummy_verify(password)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not verify_password(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            summary = UserSummary.from_user(user)
            token = self.token_issuer.issue(user.id, user.email)

        logger.info(f"User {summary.id} logged in")

        return Return.ok(
            LoginResponse(
                user=summary,
                token=token,
                expires_in=self.token_issuer.expires_in,
            )
        )
