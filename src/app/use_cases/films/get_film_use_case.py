"""
Get Film Use Case
"""

from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import FilmInfo


class GetFilmUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, film_id: UUID) -> Result[FilmInfo]:
        async with self.uow:
            film = await self.uow.films.get_by_id(film_id)
            if film is None:
                return Return.err(Error("FILM_NOT_FOUND", "Film not found"))

            return Return.ok(FilmInfo.from_film(film))
