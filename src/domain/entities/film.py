"""
Film Entity

Catalog entry. Carries the rating aggregate derived from Rating rows.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Film(SQLModel, table=True):
    """
    Film entity - a catalog entry.

    Business Rules:
    - average_rating is the mean of all current ratings, one decimal
    - total_ratings is the number of current ratings
    - Both are 0 when the film has no ratings
    - Both are written only by the rating aggregator
    """

    __tablename__ = "films"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255, index=True)
    genre: str = Field(max_length=100)
    release_date: Optional[date] = None
    description: str = Field(default="")
    url: str = Field(default="", max_length=500)
    poster_image: str = Field(default="", max_length=500)

    # Derived rating aggregate
    average_rating: float = Field(default=0.0)
    total_ratings: int = Field(default=0)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
