from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.films import (
    ListFilmsUseCase,
    ListFilmsByGenreUseCase,
    GetFilmUseCase,
    GetStreamingInfoUseCase,
    FilmInfo,
    FilmListResponse,
    StreamingInfoResponse,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/films", tags=["Films"])


def _raise_for_error(error):
    if error.code in ("FILM_NOT_FOUND", "FILMS_NOT_FOUND", "STREAM_NOT_AVAILABLE"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=FilmListResponse)
async def list_films(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Whole catalog, ordered by name"""
    use_case = ListFilmsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get("/genre/{genre}", status_code=status.HTTP_200_OK, response_model=FilmListResponse)
async def list_films_by_genre(genre: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Films of one genre (case-insensitive)

    Raises:
        - 404 Not Found: No film has this genre
    """
    use_case = ListFilmsByGenreUseCase(uow)
    result = await use_case.execute(genre)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get("/{film_id}", status_code=status.HTTP_200_OK, response_model=FilmInfo)
async def get_film(film_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Film details with its rating aggregate

    Raises:
        - 404 Not Found: Film does not exist
    """
    use_case = GetFilmUseCase(uow)
    result = await use_case.execute(film_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get(
    "/{film_id}/stream", status_code=status.HTTP_200_OK, response_model=StreamingInfoResponse
)
async def get_streaming_info(film_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Stream URL and player details

    Raises:
        - 404 Not Found: Film does not exist or has no stream
    """
    use_case = GetStreamingInfoUseCase(uow)
    result = await use_case.execute(film_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value
