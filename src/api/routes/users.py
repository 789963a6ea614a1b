from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.api.utils.ownership import require_own_account
from src.app.services.token_issuer import SessionClaims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    RegisterUserUseCase,
    UpdateUserUseCase,
    GetProfileUseCase,
    AddFavoriteUseCase,
    RemoveFavoriteUseCase,
    RegisterUserCommand,
    UpdateUserCommand,
    UserSummary,
    UserProfile,
    FavoritesResponse,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/users", tags=["Users"])


def _raise_for_error(error):
    if error.code == "INVALID_PASSWORD":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "INVALID_CURRENT_PASSWORD":
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
    elif error.code in ("USER_NOT_FOUND", "FILM_NOT_FOUND", "FAVORITE_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "EMAIL_ALREADY_EXISTS":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


class RegisterRequest(BaseModel):
    """
    Registration HTTP request payload

    Validates incoming HTTP request before converting to RegisterUserCommand.
    """

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="Password (complexity checked by use case)")
    age: int = Field(..., ge=0, le=120)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserSummary)
async def register(request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Register a new user

    Raises:
        - 400 Bad Request: Password does not meet requirements
        - 409 Conflict: Email already registered
        - 422 Unprocessable Entity: Invalid input
    """
    command = RegisterUserCommand(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        password=request.password,
        age=request.age,
    )

    use_case = RegisterUserUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserProfile)
async def get_me(
    current_user: SessionClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current user profile, from the session token

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 404 Not Found: Account no longer exists
    """
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(current_user.user_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get("/me/favorites", status_code=status.HTTP_200_OK, response_model=FavoritesResponse)
async def get_favorites(
    current_user: SessionClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(current_user.user_id)

    if result.is_err():
        _raise_for_error(result.error)

    return FavoritesResponse(favorites=result.value.favorites)


@router.post(
    "/me/favorites/{film_id}", status_code=status.HTTP_200_OK, response_model=FavoritesResponse
)
async def add_favorite(
    film_id: UUID,
    current_user: SessionClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = AddFavoriteUseCase(uow)
    result = await use_case.execute(current_user.user_id, film_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.delete(
    "/me/favorites/{film_id}", status_code=status.HTTP_200_OK, response_model=FavoritesResponse
)
async def remove_favorite(
    film_id: UUID,
    current_user: SessionClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = RemoveFavoriteUseCase(uow)
    result = await use_case.execute(current_user.user_id, film_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


class UpdateUserRequest(BaseModel):
    """Profile update payload; omitted fields are left unchanged"""

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    age: Optional[int] = Field(None, ge=0, le=120)
    password: Optional[str] = None
    current_password: Optional[str] = None


@router.put("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserProfile)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    current_user: SessionClaims = Depends(require_own_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update own account

    Raises:
        - 400 Bad Request: New password does not meet requirements
        - 401 Unauthorized: Missing/invalid token, or current_password is wrong
        - 403 Forbidden: Trying to modify another user's account
        - 404 Not Found: Account no longer exists
        - 409 Conflict: New email already registered
    """
    command = UpdateUserCommand(**request.model_dump(exclude_unset=True))

    use_case = UpdateUserUseCase(uow)
    result = await use_case.execute(user_id, command)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value
