"""
Register User Use Case

Creates a new account with a hashed password.
"""

import logging

from sqlalchemy.exc import IntegrityError

from src.libs.result import Error, Result, Return
from src.app.services.credentials import hash_password, validate_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from .dtos import RegisterUserCommand, UserSummary

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """
    Register Use Case

    Business Logic:
    1. Validate password complexity
    2. Check if email already exists
    3. Hash password with bcrypt
    4. Create User
    5. Commit
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterUserCommand) -> Result[UserSummary]:
        """
        Execute register use case

        Args:
            command: RegisterUserCommand with profile fields and password

        Returns:
            Result[UserSummary], or INVALID_PASSWORD / EMAIL_ALREADY_EXISTS
        """
        email = command.email.strip().lower()

        async with self.uow:
            password_validation = validate_password(command.password)
            if password_validation.is_err():
                return Return.err(password_validation.error)

            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "This email address is already registered")
                )

            user = User(
                first_name=command.first_name.strip(),
                last_name=command.last_name.strip(),
                email=email,
                password_hash=hash_password(command.password),
                age=command.age,
            )

            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                # Concurrent registration with the same email
                await self.uow.rollback()
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "This email address is already registered")
                )

            logger.info(f"User {user.id} registered")
            return Return.ok(UserSummary.from_user(user))
