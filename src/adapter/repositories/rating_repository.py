from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.rating_repository import IRatingRepository
from src.domain.base import utcnow
from src.domain.entities import Rating


class RatingRepository(IRatingRepository):
    """Rating repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, rating_id: UUID) -> Optional[Rating]:
        """Get rating by ID"""
        stmt = select(Rating).where(Rating.id == rating_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_user_and_film(
        self, user_id: UUID, film_id: UUID
    ) -> Optional[Rating]:
        """Get the rating a user gave a film"""
        stmt = select(Rating).where(
            Rating.user_id == user_id, Rating.film_id == film_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_film_id(self, film_id: UUID) -> List[Rating]:
        """All ratings for a film, newest first"""
        stmt = (
            select(Rating)
            .where(Rating.film_id == film_id)
            .order_by(Rating.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_user_id(self, user_id: UUID) -> List[Rating]:
        """All ratings by a user, newest first"""
        stmt = (
            select(Rating)
            .where(Rating.user_id == user_id)
            .order_by(Rating.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, rating: Rating) -> Rating:
        """Create a new rating"""
        self.session.add(rating)
        await self.session.flush()
        await self.session.refresh(rating)
        return rating

    async def update(self, rating: Rating) -> Rating:
        """Update existing rating"""
        rating.updated_at = utcnow()
        self.session.add(rating)
        await self.session.flush()
        await self.session.refresh(rating)
        return rating

    async def delete(self, rating: Rating) -> None:
        """Delete a rating"""
        await self.session.delete(rating)
        await self.session.flush()
