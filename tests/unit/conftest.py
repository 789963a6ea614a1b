import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.films = MagicMock()
    uow.films.get_by_id = AsyncMock()
    uow.films.list_all = AsyncMock(return_value=[])
    uow.films.list_by_genre = AsyncMock(return_value=[])
    uow.films.update_rating_stats = AsyncMock(return_value=None)

    uow.ratings = MagicMock()
    uow.ratings.get_by_id = AsyncMock()
    uow.ratings.get_by_user_and_film = AsyncMock(return_value=None)
    uow.ratings.list_by_film_id = AsyncMock(return_value=[])
    uow.ratings.list_by_user_id = AsyncMock(return_value=[])
    uow.ratings.create = AsyncMock(side_effect=lambda rating: rating)
    uow.ratings.update = AsyncMock(side_effect=lambda rating: rating)
    uow.ratings.delete = AsyncMock()

    uow.password_reset_tokens = MagicMock()
    uow.password_reset_tokens.create = AsyncMock(side_effect=lambda token: token)
    uow.password_reset_tokens.get_active_by_token_hash = AsyncMock()
    uow.password_reset_tokens.mark_used = AsyncMock(return_value=True)

    return uow
