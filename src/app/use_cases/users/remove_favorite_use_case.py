"""
Remove Favorite Use Case

Removes a film from the current user's favorites.
"""

from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import FavoritesResponse


class RemoveFavoriteUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, film_id: UUID) -> Result[FavoritesResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            favorites = list(user.favorites or [])
            if str(film_id) not in favorites:
                return Return.err(Error("FAVORITE_NOT_FOUND", "Film is not in favorites"))

            user.favorites = [f for f in favorites if f != str(film_id)]
            user = await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(FavoritesResponse(favorites=list(user.favorites)))
