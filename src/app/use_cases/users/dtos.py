"""
User Use Case DTOs (Data Transfer Objects)

Commands and responses for the users domain.
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import User


class RegisterUserCommand(BaseModel):
    """Register command - validated registration intent"""

    first_name: str
    last_name: str
    email: str
    password: str
    age: int


class UpdateUserCommand(BaseModel):
    """
    Update command - only fields that are set are applied.

    current_password, when given, must match before a password change.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None
    password: Optional[str] = None
    current_password: Optional[str] = None


class UserSummary(BaseModel):
    """Identity summary returned by login and registration"""

    id: str
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )


class UserProfile(UserSummary):
    """Full profile of the current user"""

    age: int
    favorites: List[str]

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            age=user.age,
            favorites=list(user.favorites or []),
        )


class FavoritesResponse(BaseModel):
    """Favorite film ids of a user"""

    favorites: List[str]
