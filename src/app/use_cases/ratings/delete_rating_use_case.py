"""
Delete Rating Use Case

Removes a rating and refreshes the film aggregate.
"""

from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.rating_aggregator import RatingAggregator
from src.app.services.unit_of_work import UnitOfWork
from .dtos import DeleteRatingResponse, FilmRatingInfo


class DeleteRatingUseCase:
    """
    Business Rules:
    - Only the author of a rating may delete it
    - Aggregate is recomputed after the delete is committed
    """

    def __init__(self, uow: UnitOfWork, aggregator: Optional[RatingAggregator] = None):
        self.uow = uow
        self.aggregator = aggregator or RatingAggregator(uow)

    async def execute(self, user_id: UUID, rating_id: UUID) -> Result[DeleteRatingResponse]:
        async with self.uow:
            rating = await self.uow.ratings.get_by_id(rating_id)
            if rating is None:
                return Return.err(Error("RATING_NOT_FOUND", "Rating not found"))

            if rating.user_id != user_id:
                return Return.err(
                    Error("FORBIDDEN", "You can only delete your own ratings")
                )

            film_id = rating.film_id
            film = await self.uow.films.get_by_id(film_id)

            await self.uow.ratings.delete(rating)
            await self.uow.commit()

            film_rating = FilmRatingInfo.from_film(film) if film is not None else None

            updated_film = await self.aggregator.recompute(film_id)
            if updated_film is not None:
                film_rating = FilmRatingInfo.from_film(updated_film)

            if film_rating is None:
                # Orphan rating whose film is gone
                film_rating = FilmRatingInfo(
                    film_id=str(film_id), film_name="", average_rating=0.0, total_ratings=0
                )

            return Return.ok(
                DeleteRatingResponse(
                    status="deleted",
                    message="Rating deleted successfully",
                    film_rating=film_rating,
                )
            )
