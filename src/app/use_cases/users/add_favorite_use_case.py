"""
Add Favorite Use Case

Adds a film to the current user's favorites.
"""

from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import FavoritesResponse


class AddFavoriteUseCase:
    """
    Business Rules:
    - Film must exist
    - Adding a film twice is a no-op
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, film_id: UUID) -> Result[FavoritesResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            film = await self.uow.films.get_by_id(film_id)
            if film is None:
                return Return.err(Error("FILM_NOT_FOUND", "Film not found"))

            favorites = list(user.favorites or [])
            if str(film_id) not in favorites:
                # Assign a new list so the JSON column is flagged as changed
                user.favorites = favorites + [str(film_id)]
                user = await self.uow.users.update(user)
                await self.uow.commit()

            return Return.ok(FavoritesResponse(favorites=list(user.favorites)))
