"""
Film Use Cases

Read-only catalog browsing.
"""

from .list_films_use_case import ListFilmsUseCase
from .list_films_by_genre_use_case import ListFilmsByGenreUseCase
from .get_film_use_case import GetFilmUseCase
from .get_streaming_info_use_case import GetStreamingInfoUseCase
from .dtos import (
    FilmInfo,
    FilmListResponse,
    StreamingFilm,
    StreamingInfoResponse,
)

__all__ = [
    # Use Cases
    "ListFilmsUseCase",
    "ListFilmsByGenreUseCase",
    "GetFilmUseCase",
    "GetStreamingInfoUseCase",
    # DTOs
    "FilmInfo",
    "FilmListResponse",
    "StreamingFilm",
    "StreamingInfoResponse",
]
