"""
Unit tests for rating use cases

The aggregator runs against the same mocked uow, so the aggregate written
back is whatever list_by_film_id returns after the mutation.
"""
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from src.app.use_cases.ratings import (
    CreateRatingUseCase,
    DeleteRatingUseCase,
    ListFilmRatingsUseCase,
    ListUserRatingsUseCase,
    UpdateRatingUseCase,
)
from src.domain.entities import Film, Rating


def make_film(**kwargs):
    return Film(id=kwargs.pop("id", uuid4()), name="Metropolis", genre="Sci-Fi", **kwargs)


def stats_writer(film):
    """update_rating_stats stand-in that applies the values to film"""

    async def update_rating_stats(film_id, average_rating, total_ratings):
        film.average_rating = average_rating
        film.total_ratings = total_ratings
        return film

    return update_rating_stats


# ============================================================================
# Create
# ============================================================================


@pytest.mark.asyncio
async def test_create_rating_updates_aggregate(mock_uow):
    # Arrange
    user_id = uuid4()
    film = make_film()
    mock_uow.films.get_by_id.return_value = film
    mock_uow.films.update_rating_stats.side_effect = stats_writer(film)
    mock_uow.ratings.list_by_film_id.return_value = [
        Rating(user_id=uuid4(), film_id=film.id, rate=3.0),
        Rating(user_id=uuid4(), film_id=film.id, rate=5.0),
        Rating(user_id=user_id, film_id=film.id, rate=4.0),
    ]

    # Act
    result = await CreateRatingUseCase(mock_uow).execute(user_id, film.id, 4)

    # Assert
    assert result.is_ok()
    response = result.value
    assert response.rating.rate == 4.0
    assert response.rating.user_id == str(user_id)
    assert response.film_rating.average_rating == 4.0
    assert response.film_rating.total_ratings == 3

    created = mock_uow.ratings.create.call_args[0][0]
    assert created.film_id == film.id
    # Rating commit, then aggregate commit
    assert mock_uow.commit.call_count == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("rate", [6, -0.5, 5.01, float("nan"), "4", None, True])
async def test_create_rating_invalid_rate(mock_uow, rate):
    result = await CreateRatingUseCase(mock_uow).execute(uuid4(), uuid4(), rate)

    assert result.is_err()
    assert result.error.code == "INVALID_RATING"
    assert result.error.message == "Rating must be a number between 0 and 5"
    mock_uow.ratings.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("rate", [0, 0.0, 2.5, 5])
async def test_create_rating_boundaries_accepted(mock_uow, rate):
    film = make_film()
    mock_uow.films.get_by_id.return_value = film
    mock_uow.films.update_rating_stats.side_effect = stats_writer(film)

    result = await CreateRatingUseCase(mock_uow).execute(uuid4(), film.id, rate)

    assert result.is_ok()
    assert result.value.rating.rate == float(rate)


@pytest.mark.asyncio
async def test_create_rating_film_not_found(mock_uow):
    mock_uow.films.get_by_id.return_value = None

    result = await CreateRatingUseCase(mock_uow).execute(uuid4(), uuid4(), 4)

    assert result.is_err()
    assert result.error.code == "FILM_NOT_FOUND"


@pytest.mark.asyncio
async def test_create_rating_duplicate(mock_uow):
    user_id = uuid4()
    film = make_film()
    mock_uow.films.get_by_id.return_value = film
    mock_uow.ratings.get_by_user_and_film.return_value = Rating(
        user_id=user_id, film_id=film.id, rate=3.0
    )

    result = await CreateRatingUseCase(mock_uow).execute(user_id, film.id, 4)

    assert result.is_err()
    assert result.error.code == "RATING_ALREADY_EXISTS"
    mock_uow.ratings.create.assert_not_called()
    mock_uow.films.update_rating_stats.assert_not_called()


@pytest.mark.asyncio
async def test_create_rating_concurrent_duplicate(mock_uow):
    """Unique constraint violation is reported as the same conflict"""
    film = make_film()
    mock_uow.films.get_by_id.return_value = film
    mock_uow.commit.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE"))

    result = await CreateRatingUseCase(mock_uow).execute(uuid4(), film.id, 4)

    assert result.is_err()
    assert result.error.code == "RATING_ALREADY_EXISTS"
    mock_uow.rollback.assert_called_once()
    mock_uow.films.update_rating_stats.assert_not_called()


@pytest.mark.asyncio
async def test_create_rating_survives_failed_recompute(mock_uow):
    """Rating is kept and the pre-recompute aggregate is returned"""
    from sqlalchemy.exc import OperationalError

    film = make_film(average_rating=3.0, total_ratings=1)
    mock_uow.films.get_by_id.return_value = film
    mock_uow.ratings.list_by_film_id.side_effect = OperationalError("SELECT", {}, Exception("down"))

    result = await CreateRatingUseCase(mock_uow).execute(uuid4(), film.id, 5)

    assert result.is_ok()
    assert result.value.film_rating.average_rating == 3.0
    assert result.value.film_rating.total_ratings == 1
    mock_uow.commit.assert_called_once()


# ============================================================================
# Update
# ============================================================================


@pytest.mark.asyncio
async def test_update_rating(mock_uow):
    user_id = uuid4()
    film = make_film()
    rating = Rating(id=uuid4(), user_id=user_id, film_id=film.id, rate=2.0)
    mock_uow.ratings.get_by_id.return_value = rating
    mock_uow.films.get_by_id.return_value = film
    mock_uow.films.update_rating_stats.side_effect = stats_writer(film)
    mock_uow.ratings.list_by_film_id.return_value = [rating]

    result = await UpdateRatingUseCase(mock_uow).execute(user_id, rating.id, 4.5)

    assert result.is_ok()
    assert result.value.rating.rate == 4.5
    assert result.value.film_rating.average_rating == 4.5
    assert result.value.film_rating.total_ratings == 1


@pytest.mark.asyncio
async def test_update_rating_of_someone_else(mock_uow):
    rating = Rating(id=uuid4(), user_id=uuid4(), film_id=uuid4(), rate=2.0)
    mock_uow.ratings.get_by_id.return_value = rating

    result = await UpdateRatingUseCase(mock_uow).execute(uuid4(), rating.id, 4)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    assert rating.rate == 2.0
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_update_rating_not_found(mock_uow):
    mock_uow.ratings.get_by_id.return_value = None

    result = await UpdateRatingUseCase(mock_uow).execute(uuid4(), uuid4(), 4)

    assert result.is_err()
    assert result.error.code == "RATING_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_rating_invalid_rate(mock_uow):
    result = await UpdateRatingUseCase(mock_uow).execute(uuid4(), uuid4(), 7)

    assert result.is_err()
    assert result.error.code == "INVALID_RATING"
    mock_uow.ratings.get_by_id.assert_not_called()


# ============================================================================
# Delete
# ============================================================================


@pytest.mark.asyncio
async def test_delete_rating_recomputes_from_remaining(mock_uow):
    """[3, 5, 4] minus the 3 leaves 4.5 over 2 ratings"""
    user_id = uuid4()
    film = make_film(average_rating=4.0, total_ratings=3)
    rating = Rating(id=uuid4(), user_id=user_id, film_id=film.id, rate=3.0)
    mock_uow.ratings.get_by_id.return_value = rating
    mock_uow.films.get_by_id.return_value = film
    mock_uow.films.update_rating_stats.side_effect = stats_writer(film)
    mock_uow.ratings.list_by_film_id.return_value = [
        Rating(user_id=uuid4(), film_id=film.id, rate=5.0),
        Rating(user_id=uuid4(), film_id=film.id, rate=4.0),
    ]

    result = await DeleteRatingUseCase(mock_uow).execute(user_id, rating.id)

    assert result.is_ok()
    assert result.value.status == "deleted"
    assert result.value.film_rating.average_rating == 4.5
    assert result.value.film_rating.total_ratings == 2
    mock_uow.ratings.delete.assert_called_once_with(rating)


@pytest.mark.asyncio
async def test_delete_last_rating_resets_aggregate(mock_uow):
    user_id = uuid4()
    film = make_film(average_rating=3.0, total_ratings=1)
    rating = Rating(id=uuid4(), user_id=user_id, film_id=film.id, rate=3.0)
    mock_uow.ratings.get_by_id.return_value = rating
    mock_uow.films.get_by_id.return_value = film
    mock_uow.films.update_rating_stats.side_effect = stats_writer(film)

    result = await DeleteRatingUseCase(mock_uow).execute(user_id, rating.id)

    assert result.value.film_rating.average_rating == 0.0
    assert result.value.film_rating.total_ratings == 0


@pytest.mark.asyncio
async def test_delete_rating_of_someone_else(mock_uow):
    rating = Rating(id=uuid4(), user_id=uuid4(), film_id=uuid4(), rate=3.0)
    mock_uow.ratings.get_by_id.return_value = rating

    result = await DeleteRatingUseCase(mock_uow).execute(uuid4(), rating.id)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.ratings.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_orphan_rating(mock_uow):
    """Film vanished: the rating is still deleted"""
    user_id = uuid4()
    film_id = uuid4()
    rating = Rating(id=uuid4(), user_id=user_id, film_id=film_id, rate=3.0)
    mock_uow.ratings.get_by_id.return_value = rating
    mock_uow.films.get_by_id.return_value = None
    mock_uow.films.update_rating_stats.return_value = None

    result = await DeleteRatingUseCase(mock_uow).execute(user_id, rating.id)

    assert result.is_ok()
    assert result.value.film_rating.film_id == str(film_id)
    assert result.value.film_rating.total_ratings == 0


# ============================================================================
# Listing
# ============================================================================


@pytest.mark.asyncio
async def test_list_film_ratings(mock_uow):
    film = make_film(average_rating=4.0, total_ratings=2)
    mock_uow.films.get_by_id.return_value = film
    mock_uow.ratings.list_by_film_id.return_value = [
        Rating(id=uuid4(), user_id=uuid4(), film_id=film.id, rate=5.0),
        Rating(id=uuid4(), user_id=uuid4(), film_id=film.id, rate=3.0),
    ]

    result = await ListFilmRatingsUseCase(mock_uow).execute(film.id)

    assert result.is_ok()
    assert result.value.film.film_name == "Metropolis"
    assert [r.rate for r in result.value.ratings] == [5.0, 3.0]


@pytest.mark.asyncio
async def test_list_film_ratings_film_not_found(mock_uow):
    mock_uow.films.get_by_id.return_value = None

    result = await ListFilmRatingsUseCase(mock_uow).execute(uuid4())

    assert result.error.code == "FILM_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_user_ratings(mock_uow):
    user_id = uuid4()
    mock_uow.ratings.list_by_user_id.return_value = [
        Rating(id=uuid4(), user_id=user_id, film_id=uuid4(), rate=1.0)
    ]

    result = await ListUserRatingsUseCase(mock_uow).execute(user_id)

    assert result.value.user_id == str(user_id)
    assert result.value.count == 1
