"""
Rating Entity

A single user's score for a single film.
"""

import math
from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import UniqueConstraint
from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow

MIN_RATE = 0.0
MAX_RATE = 5.0


class Rating(SQLModel, table=True):
    """
    Rating entity - one score per (user, film) pair.

    Business Rules:
    - rate is within [0, 5]
    - A second rating for the same pair is rejected; updates go through PUT
    - Every create/update/delete triggers a film aggregate recompute
    """

    __tablename__ = "ratings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", index=True)
    film_id: UUID = Field(foreign_key="films.id", index=True)
    rate: float

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("user_id", "film_id", name="uq_rating_user_film"),
    )


def is_valid_rate(rate) -> bool:
    """A rate is a finite number within [MIN_RATE, MAX_RATE]"""
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        return False
    return math.isfinite(rate) and MIN_RATE <= rate <= MAX_RATE
