"""
User Use Cases

Registration, profile and favorites.
"""

from .register_user_use_case import RegisterUserUseCase
from .update_user_use_case import UpdateUserUseCase
from .get_profile_use_case import GetProfileUseCase
from .add_favorite_use_case import AddFavoriteUseCase
from .remove_favorite_use_case import RemoveFavoriteUseCase
from .dtos import (
    RegisterUserCommand,
    UpdateUserCommand,
    UserSummary,
    UserProfile,
    FavoritesResponse,
)

__all__ = [
    # Use Cases
    "RegisterUserUseCase",
    "UpdateUserUseCase",
    "GetProfileUseCase",
    "AddFavoriteUseCase",
    "RemoveFavoriteUseCase",
    # DTOs
    "RegisterUserCommand",
    "UpdateUserCommand",
    "UserSummary",
    "UserProfile",
    "FavoritesResponse",
]
