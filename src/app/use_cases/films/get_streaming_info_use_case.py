"""
Get Streaming Info Use Case

Resolves the stream URL of a film for the player.
"""

from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import StreamingFilm, StreamingInfoResponse


class GetStreamingInfoUseCase:
    """
    Business Rules:
    - Film must exist
    - A film without a stream URL is STREAM_NOT_AVAILABLE
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, film_id: UUID) -> Result[StreamingInfoResponse]:
        async with self.uow:
            film = await self.uow.films.get_by_id(film_id)
            if film is None:
                return Return.err(Error("FILM_NOT_FOUND", "Film not found"))

            if not film.url:
                return Return.err(
                    Error("STREAM_NOT_AVAILABLE", "This film has no stream available")
                )

            return Return.ok(
                StreamingInfoResponse(
                    stream_url=film.url,
                    film=StreamingFilm(
                        id=str(film.id),
                        name=film.name,
                        genre=film.genre,
                        description=film.description,
                        release_date=film.release_date,
                    ),
                )
            )
