from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.film_repository import IFilmRepository
from src.domain.base import utcnow
from src.domain.entities import Film


class FilmRepository(IFilmRepository):
    """Film repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, film_id: UUID) -> Optional[Film]:
        """Get film by ID"""
        stmt = select(Film).where(Film.id == film_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Film]:
        """All films, ordered by name"""
        stmt = select(Film).order_by(Film.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_genre(self, genre: str) -> List[Film]:
        """Films of a genre (case-insensitive), ordered by name"""
        stmt = (
            select(Film)
            .where(func.lower(Film.genre) == genre.strip().lower())
            .order_by(Film.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def update_rating_stats(
        self, film_id: UUID, average_rating: float, total_ratings: int
    ) -> Optional[Film]:
        """Write the derived rating aggregate back to the film"""
        film = await self.get_by_id(film_id)
        if film is None:
            return None

        film.average_rating = average_rating
        film.total_ratings = total_ratings
        film.updated_at = utcnow()
        self.session.add(film)
        await self.session.flush()
        await self.session.refresh(film)
        return film
