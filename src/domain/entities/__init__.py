"""
Catalog Service Domain Entities

Each entity in its own file.
"""

from .user import User
from .film import Film
from .rating import Rating, MIN_RATE, MAX_RATE, is_valid_rate
from .password_reset_token import PasswordResetToken

__all__ = [
    "User",
    "Film",
    "Rating",
    "PasswordResetToken",
    "MIN_RATE",
    "MAX_RATE",
    "is_valid_rate",
]
