"""
Rating Use Cases

Every mutation here is followed by a film aggregate recompute.
"""

from .create_rating_use_case import CreateRatingUseCase
from .update_rating_use_case import UpdateRatingUseCase
from .delete_rating_use_case import DeleteRatingUseCase
from .list_film_ratings_use_case import ListFilmRatingsUseCase
from .list_user_ratings_use_case import ListUserRatingsUseCase
from .dtos import (
    RatingInfo,
    FilmRatingInfo,
    RatingResponse,
    DeleteRatingResponse,
    FilmRatingsResponse,
    UserRatingsResponse,
)

__all__ = [
    # Use Cases
    "CreateRatingUseCase",
    "UpdateRatingUseCase",
    "DeleteRatingUseCase",
    "ListFilmRatingsUseCase",
    "ListUserRatingsUseCase",
    # DTOs
    "RatingInfo",
    "FilmRatingInfo",
    "RatingResponse",
    "DeleteRatingResponse",
    "FilmRatingsResponse",
    "UserRatingsResponse",
]
