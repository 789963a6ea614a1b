"""
List Films Use Case
"""

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import FilmInfo, FilmListResponse


class ListFilmsUseCase:
    """Whole catalog, ordered by name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[FilmListResponse]:
        async with self.uow:
            films = await self.uow.films.list_all()

            return Return.ok(
                FilmListResponse(
                    films=[FilmInfo.from_film(f) for f in films],
                    count=len(films),
                )
            )
