"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for the auth domain.
"""

from pydantic import BaseModel

from src.app.use_cases.users.dtos import UserSummary


class LoginResponse(BaseModel):
    """Response for user login use case"""

    user: UserSummary
    token: str
    expires_in: int


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    status: str
    message: str


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    status: str
    message: str
