from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.notification_sender import INotificationSender
from src.app.services.token_issuer import SessionClaims, TokenIssuer
from src.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# auto_error=False so a missing header becomes our own 401 envelope
security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_notification_sender(request: Request) -> INotificationSender:
    return request.app.state.notification_sender


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> SessionClaims:
    """
    Auth gate: extract and verify the JWT from the Authorization header.

    Args:
        credentials: Bearer token from Authorization header
        token_issuer: Process-wide token issuer

    Returns:
        SessionClaims with user_id and email

    Raises:
        ClientError: 401 if the header is missing/malformed or the token is
            invalid or expired
        ConfigurationError: signing key not configured (rendered as 500)
    """
    if credentials is None:
        raise ClientError(
            Error("AUTHENTICATION_REQUIRED", "Authentication required. No token provided."),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    result = token_issuer.validate(credentials.credentials)
    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)

    return result.value
