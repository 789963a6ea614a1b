"""
Rating Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel

from src.domain.entities import Film, Rating


class RatingInfo(BaseModel):
    """A single rating"""

    id: str
    user_id: str
    film_id: str
    rate: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_rating(cls, rating: Rating) -> "RatingInfo":
        return cls(
            id=str(rating.id),
            user_id=str(rating.user_id),
            film_id=str(rating.film_id),
            rate=rating.rate,
            created_at=rating.created_at,
            updated_at=rating.updated_at,
        )


class FilmRatingInfo(BaseModel):
    """A film's rating aggregate"""

    film_id: str
    film_name: str
    average_rating: float
    total_ratings: int

    @classmethod
    def from_film(cls, film: Film) -> "FilmRatingInfo":
        return cls(
            film_id=str(film.id),
            film_name=film.name,
            average_rating=film.average_rating,
            total_ratings=film.total_ratings,
        )


class RatingResponse(BaseModel):
    """Response for create/update rating use cases"""

    rating: RatingInfo
    film_rating: FilmRatingInfo


class DeleteRatingResponse(BaseModel):
    """Response for delete rating use case"""

    status: str
    message: str
    film_rating: FilmRatingInfo


class FilmRatingsResponse(BaseModel):
    """Ratings of a film with its aggregate"""

    film: FilmRatingInfo
    ratings: List[RatingInfo]


class UserRatingsResponse(BaseModel):
    """Ratings given by a user"""

    user_id: str
    ratings: List[RatingInfo]
    count: int
