"""
Update User Use Case

Profile edits and password changes for the account owner.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from src.libs.result import Error, Result, Return
from src.app.services.credentials import hash_password, validate_password, verify_password
from src.app.services.unit_of_work import UnitOfWork
from .dtos import UpdateUserCommand, UserProfile

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """
    Use case for updating a user's own account.

    Business Rules:
    - Ownership is enforced by the caller (auth gate)
    - A new password must meet complexity requirements and is rehashed
    - If current_password is supplied it must match before the change
    - A new email must not belong to another user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, command: UpdateUserCommand) -> Result[UserProfile]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if command.password is not None:
                password_validation = validate_password(command.password)
                if password_validation.is_err():
                    return Return.err(password_validation.error)

                if command.current_password is not None and not verify_password(
                    command.current_password, user.password_hash
                ):
                    return Return.err(
                        Error("INVALID_CURRENT_PASSWORD", "Current password is incorrect")
                    )

                user.password_hash = hash_password(command.password)

            if command.email is not None:
                email = command.email.strip().lower()
                if email != user.email:
                    other = await self.uow.users.get_by_email(email)
                    if other is not None:
                        return Return.err(
                            Error("EMAIL_ALREADY_EXISTS", "This email address is already registered")
                        )
                    user.email = email

            if command.first_name is not None:
                user.first_name = command.first_name.strip()
            if command.last_name is not None:
                user.last_name = command.last_name.strip()
            if command.age is not None:
                user.age = command.age

            try:
                user = await self.uow.users.update(user)
                await self.uow.commit()
            except IntegrityError:
                # Concurrent change to the same email
                await self.uow.rollback()
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "This email address is already registered")
                )

            if command.password is not None:
                logger.info(f"Password changed for user {user.id}")

            return Return.ok(UserProfile.from_user(user))
