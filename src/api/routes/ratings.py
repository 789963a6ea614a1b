from typing import Union
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, StrictFloat, StrictInt

from src.api.error import ClientError, ServerError
from src.app.services.token_issuer import SessionClaims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.ratings import (
    CreateRatingUseCase,
    UpdateRatingUseCase,
    DeleteRatingUseCase,
    ListFilmRatingsUseCase,
    ListUserRatingsUseCase,
    RatingResponse,
    DeleteRatingResponse,
    FilmRatingsResponse,
    UserRatingsResponse,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/ratings", tags=["Ratings"])


def _raise_for_error(error):
    if error.code == "INVALID_RATING":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "FORBIDDEN":
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code in ("FILM_NOT_FOUND", "RATING_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "RATING_ALREADY_EXISTS":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


class RateRequest(BaseModel):
    """
    Rating HTTP request payload

    Strict number: booleans and numeric strings are rejected by the schema.
    Range is checked by the use case so out-of-range values get INVALID_RATING.
    """

    rate: Union[StrictInt, StrictFloat] = Field(..., description="Score between 0 and 5")


@router.post(
    "/films/{film_id}", status_code=status.HTTP_201_CREATED, response_model=RatingResponse
)
async def create_rating(
    film_id: UUID,
    request: RateRequest,
    current_user: SessionClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Rate a film

    Returns the rating and the film's updated average_rating / total_ratings.

    Raises:
        - 400 Bad Request: rate outside [0, 5]
        - 401 Unauthorized: Missing, invalid or expired token
        - 404 Not Found: Film does not exist
        - 409 Conflict: Film already rated by this user (use PUT)
    """
    use_case = CreateRatingUseCase(uow)
    result = await use_case.execute(current_user.user_id, film_id, request.rate)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get(
    "/films/{film_id}", status_code=status.HTTP_200_OK, response_model=FilmRatingsResponse
)
async def get_film_ratings(film_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Ratings of a film, newest first, with the film's aggregate"""
    use_case = ListFilmRatingsUseCase(uow)
    result = await use_case.execute(film_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get(
    "/users/{user_id}", status_code=status.HTTP_200_OK, response_model=UserRatingsResponse
)
async def get_user_ratings(user_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Ratings given by a user, newest first"""
    use_case = ListUserRatingsUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.put("/{rating_id}", status_code=status.HTTP_200_OK, response_model=RatingResponse)
async def update_rating(
    rating_id: UUID,
    request: RateRequest,
    current_user: SessionClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change own rating

    Raises:
        - 400 Bad Request: rate outside [0, 5]
        - 403 Forbidden: Rating belongs to another user
        - 404 Not Found: Rating does not exist
    """
    use_case = UpdateRatingUseCase(uow)
    result = await use_case.execute(current_user.user_id, rating_id, request.rate)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.delete(
    "/{rating_id}", status_code=status.HTTP_200_OK, response_model=DeleteRatingResponse
)
async def delete_rating(
    rating_id: UUID,
    current_user: SessionClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete own rating

    Raises:
        - 403 Forbidden: Rating belongs to another user
        - 404 Not Found: Rating does not exist
    """
    use_case = DeleteRatingUseCase(uow)
    result = await use_case.execute(current_user.user_id, rating_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value
