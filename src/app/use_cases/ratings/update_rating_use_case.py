"""
Update Rating Use Case

Changes the score of an existing rating and refreshes the film aggregate.
"""

from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.rating_aggregator import RatingAggregator
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import is_valid_rate
from .dtos import FilmRatingInfo, RatingInfo, RatingResponse


class UpdateRatingUseCase:
    """
    Business Rules:
    - rate must be a number within [0, 5]
    - Only the author of a rating may change it
    - Aggregate is recomputed after the change is committed
    """

    def __init__(self, uow: UnitOfWork, aggregator: Optional[RatingAggregator] = None):
        self.uow = uow
        self.aggregator = aggregator or RatingAggregator(uow)

    async def execute(self, user_id: UUID, rating_id: UUID, rate: float) -> Result[RatingResponse]:
        async with self.uow:
            if not is_valid_rate(rate):
                return Return.err(
                    Error("INVALID_RATING", "Rating must be a number between 0 and 5")
                )

            rating = await self.uow.ratings.get_by_id(rating_id)
            if rating is None:
                return Return.err(Error("RATING_NOT_FOUND", "Rating not found"))

            if rating.user_id != user_id:
                return Return.err(
                    Error("FORBIDDEN", "You can only modify your own ratings")
                )

            film = await self.uow.films.get_by_id(rating.film_id)
            if film is None:
                return Return.err(Error("FILM_NOT_FOUND", "Film not found"))

            rating.rate = float(rate)
            rating = await self.uow.ratings.update(rating)
            await self.uow.commit()

            rating_info = RatingInfo.from_rating(rating)
            film_rating = FilmRatingInfo.from_film(film)

            updated_film = await self.aggregator.recompute(film.id)
            if updated_film is not None:
                film_rating = FilmRatingInfo.from_film(updated_film)

            return Return.ok(RatingResponse(rating=rating_info, film_rating=film_rating))
