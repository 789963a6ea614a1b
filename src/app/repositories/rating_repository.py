from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Rating


class IRatingRepository(ABC):
    """Rating repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, rating_id: UUID) -> Optional[Rating]:
        """Get rating by ID"""
        pass

    @abstractmethod
    async def get_by_user_and_film(
        self, user_id: UUID, film_id: UUID
    ) -> Optional[Rating]:
        """Get the rating a user gave a film"""
        pass

    @abstractmethod
    async def list_by_film_id(self, film_id: UUID) -> List[Rating]:
        """All ratings for a film, newest first"""
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: UUID) -> List[Rating]:
        """All ratings by a user, newest first"""
        pass

    @abstractmethod
    async def create(self, rating: Rating) -> Rating:
        """Create a new rating"""
        pass

    @abstractmethod
    async def update(self, rating: Rating) -> Rating:
        """Update existing rating"""
        pass

    @abstractmethod
    async def delete(self, rating: Rating) -> None:
        """Delete a rating"""
        pass
