"""
Resource ownership gate

Runs after the auth gate: the authenticated identity must be the owner of
the resource it is trying to modify.
"""

from uuid import UUID

from fastapi import Depends, status
from src.libs.result import Error
from src.api.error import ClientError
from src.app.services.token_issuer import SessionClaims
from src.depends import get_current_user


def ensure_owner(claims: SessionClaims, owner_id: UUID) -> None:
    """
    Raises:
        ClientError: 403 if the authenticated user is not the owner
    """
    if claims.user_id != owner_id:
        raise ClientError(
            Error(
                "FORBIDDEN",
                "Access forbidden. You can only modify your own account information.",
            ),
            status_code=status.HTTP_403_FORBIDDEN,
        )


async def require_own_account(
    user_id: UUID, current_user: SessionClaims = Depends(get_current_user)
) -> SessionClaims:
    """Dependency for /users/{user_id} routes that modify the account"""
    ensure_owner(current_user, user_id)
    return current_user
