"""
List User Ratings Use Case
"""

from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import RatingInfo, UserRatingsResponse


class ListUserRatingsUseCase:
    """All ratings given by a user, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserRatingsResponse]:
        async with self.uow:
            ratings = await self.uow.ratings.list_by_user_id(user_id)

            return Return.ok(
                UserRatingsResponse(
                    user_id=str(user_id),
                    ratings=[RatingInfo.from_rating(r) for r in ratings],
                    count=len(ratings),
                )
            )
