"""
Film Use Case DTOs (Data Transfer Objects)

Read models for catalog browsing.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Film


class FilmInfo(BaseModel):
    """A catalog entry with its rating aggregate"""

    id: str
    name: str
    genre: str
    release_date: Optional[date]
    description: str
    url: str
    poster_image: str
    average_rating: float
    total_ratings: int

    @classmethod
    def from_film(cls, film: Film) -> "FilmInfo":
        return cls(
            id=str(film.id),
            name=film.name,
            genre=film.genre,
            release_date=film.release_date,
            description=film.description,
            url=film.url,
            poster_image=film.poster_image,
            average_rating=film.average_rating,
            total_ratings=film.total_ratings,
        )


class FilmListResponse(BaseModel):
    """A page of the catalog"""

    films: List[FilmInfo]
    count: int


class StreamingFilm(BaseModel):
    """Film details shown next to the player"""

    id: str
    name: str
    genre: str
    description: str
    release_date: Optional[date]


class StreamingInfoResponse(BaseModel):
    """Where to stream a film from"""

    stream_url: str
    film: StreamingFilm
