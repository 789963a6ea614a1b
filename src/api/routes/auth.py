from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.app.services.notification_sender import INotificationSender
from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoginUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    LoginResponse,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
)
from src.depends import get_notification_sender, get_token_issuer, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
):
    """
    User Login

    Verifies credentials and returns a session token valid for 10 hours.

    Raises:
        - 401 Unauthorized: Invalid email or password (never says which)
        - 422 Unprocessable Entity: Invalid input
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, token_issuer)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    """
    Request password reset HTTP request payload
    """

    email: EmailStr = Field(..., description="User email address")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notification_sender: INotificationSender = Depends(get_notification_sender),
):
    """
    Request Password Reset

    Generates a single-use reset token (1 hour) and emails the reset link.

    Security:
        - No email enumeration (same response for valid/invalid emails)

    Returns:
        - 200 OK: Always for registered and unregistered emails
        - 500 Internal Server Error: Reset email could not be delivered
    """
    use_case = RequestPasswordResetUseCase(
        uow,
        notification_sender,
        frontend_url=http_request.app.state.frontend_url,
        token_ttl=http_request.app.state.password_reset_ttl,
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """
    Confirm password reset HTTP request payload

    Password complexity is checked by the use case so the caller gets the
    list of unmet rules.
    """

    token: str = Field(..., min_length=1, description="Password reset token from email")
    new_password: str = Field(..., description="New password")


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def reset_password(
    request: ResetPasswordRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Confirm Password Reset

    Validates the reset token and replaces the password.

    Raises:
        - 400 Bad Request: Invalid or expired token, or password does not meet requirements
        - 500 Internal Server Error: Server error
    """
    use_case = ConfirmPasswordResetUseCase(uow)
    result = await use_case.execute(request.token, request.new_password)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_TOKEN", "INVALID_PASSWORD"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
