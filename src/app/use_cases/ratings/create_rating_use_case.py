"""
Create Rating Use Case

Records a user's rating for a film and refreshes the film aggregate.
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from src.libs.result import Error, Result, Return
from src.app.services.rating_aggregator import RatingAggregator
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Rating, is_valid_rate
from .dtos import FilmRatingInfo, RatingInfo, RatingResponse

logger = logging.getLogger(__name__)


class CreateRatingUseCase:
    """
    Use case for rating a film.

    Business Rules:
    - rate must be a number within [0, 5]
    - Film must exist
    - One rating per (user, film); a second one is a conflict
    - Rating is committed first, then the aggregate is recomputed
    - A failed recompute does not undo the rating
    """

    def __init__(self, uow: UnitOfWork, aggregator: Optional[RatingAggregator] = None):
        self.uow = uow
        self.aggregator = aggregator or RatingAggregator(uow)

    def _already_rated(self) -> Error:
        return Error(
            "RATING_ALREADY_EXISTS",
            "You have already rated this film. Use PUT to update your rating.",
        )

    async def execute(self, user_id: UUID, film_id: UUID, rate: float) -> Result[RatingResponse]:
        """
        Execute create rating use case.

        Args:
            user_id: Authenticated user
            film_id: Film being rated
            rate: Score within [0, 5]

        Returns:
            Result with the rating and the film's updated aggregate, or Error

        Errors:
            - INVALID_RATING: rate out of range or not a number
            - FILM_NOT_FOUND: film does not exist
            - RATING_ALREADY_EXISTS: user already rated this film
        """
        async with self.uow:
            if not is_valid_rate(rate):
                return Return.err(
                    Error("INVALID_RATING", "Rating must be a number between 0 and 5")
                )

            film = await self.uow.films.get_by_id(film_id)
            if film is None:
                return Return.err(Error("FILM_NOT_FOUND", "Film not found"))

            existing = await self.uow.ratings.get_by_user_and_film(user_id, film_id)
            if existing is not None:
                return Return.err(self._already_rated())

            try:
                rating = await self.uow.ratings.create(
                    Rating(user_id=user_id, film_id=film_id, rate=float(rate))
                )
                await self.uow.commit()
            except IntegrityError:
                # Unique constraint caught a concurrent duplicate
                await self.uow.rollback()
                return Return.err(self._already_rated())

            # Snapshot before recompute; a failed recompute expires session state
            rating_info = RatingInfo.from_rating(rating)
            film_rating = FilmRatingInfo.from_film(film)

            updated_film = await self.aggregator.recompute(film_id)
            if updated_film is not None:
                film_rating = FilmRatingInfo.from_film(updated_film)

            return Return.ok(RatingResponse(rating=rating_info, film_rating=film_rating))
