from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Film


class IFilmRepository(ABC):
    """Film repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, film_id: UUID) -> Optional[Film]:
        """Get film by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Film]:
        """All films, ordered by name"""
        pass

    @abstractmethod
    async def list_by_genre(self, genre: str) -> List[Film]:
        """Films of a genre (case-insensitive), ordered by name"""
        pass

    @abstractmethod
    async def update_rating_stats(
        self, film_id: UUID, average_rating: float, total_ratings: int
    ) -> Optional[Film]:
        """Write the derived rating aggregate back to the film"""
        pass
