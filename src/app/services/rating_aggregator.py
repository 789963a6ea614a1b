"""
Rating Aggregator

Keeps a film's average_rating / total_ratings equal to what its current
Rating rows say.

Every recompute is a full re-scan of the film's ratings, never an
incremental update. Two concurrent writers on the same film may leave the
aggregate reflecting only one of them; the next mutation on that film
rescans and corrects it.
"""

import logging
import math
from typing import Iterable, Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Film

logger = logging.getLogger(__name__)


def compute_rating_stats(rates: Iterable[float]) -> Tuple[float, int]:
    """
    Mean of the rates rounded half-up to one decimal, and their count.

    Returns (0.0, 0) when there are no rates.
    """
    values = list(rates)
    total = len(values)
    if total == 0:
        return 0.0, 0

    mean = sum(values) / total
    return math.floor(mean * 10 + 0.5) / 10, total


class RatingAggregator:
    """
    Recomputes and stores a film's rating aggregate.

    Uses only ratings.list_by_film_id and films.update_rating_stats.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def recompute(self, film_id: UUID) -> Optional[Film]:
        """
        Rescan all ratings of a film and write the aggregate back.

        Must be called after the triggering rating write has been committed.
        A storage failure here is logged and swallowed: the rating row is the
        source of truth and the aggregate stays stale until the next
        mutation.

        Returns:
            Updated Film, or None if the film is gone or storage failed
        """
        try:
            ratings = await self.uow.ratings.list_by_film_id(film_id)
            average_rating, total_ratings = compute_rating_stats(r.rate for r in ratings)
            film = await self.uow.films.update_rating_stats(
                film_id, average_rating, total_ratings
            )
            await self.uow.commit()
        except SQLAlchemyError:
            logger.exception(f"Failed to recompute rating aggregate for film {film_id}")
            try:
                await self.uow.rollback()
            except SQLAlchemyError:
                logger.warning(f"Rollback after failed recompute for film {film_id} failed")
            return None

        logger.info(
            f"Film {film_id} rating updated: {average_rating} ({total_ratings} ratings)"
        )
        return film
