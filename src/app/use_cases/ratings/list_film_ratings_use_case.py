"""
List Film Ratings Use Case
"""

from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import FilmRatingInfo, FilmRatingsResponse, RatingInfo


class ListFilmRatingsUseCase:
    """All ratings of a film, newest first, with the film's aggregate"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, film_id: UUID) -> Result[FilmRatingsResponse]:
        async with self.uow:
            film = await self.uow.films.get_by_id(film_id)
            if film is None:
                return Return.err(Error("FILM_NOT_FOUND", "Film not found"))

            ratings = await self.uow.ratings.list_by_film_id(film_id)

            return Return.ok(
                FilmRatingsResponse(
                    film=FilmRatingInfo.from_film(film),
                    ratings=[RatingInfo.from_rating(r) for r in ratings],
                )
            )
