"""
List Films By Genre Use Case
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import FilmInfo, FilmListResponse


class ListFilmsByGenreUseCase:
    """
    Business Rules:
    - Genre match is case-insensitive
    - A genre with no films is FILMS_NOT_FOUND, not an empty list
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, genre: str) -> Result[FilmListResponse]:
        async with self.uow:
            films = await self.uow.films.list_by_genre(genre)
            if not films:
                return Return.err(
                    Error("FILMS_NOT_FOUND", f"No films found for genre: {genre}")
                )

            return Return.ok(
                FilmListResponse(
                    films=[FilmInfo.from_film(f) for f in films],
                    count=len(films),
                )
            )
