from uuid import UUID

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.credentials import hash_password
from src.app.services.notification_sender import INotificationSender
from src.depends import get_notification_sender, get_unit_of_work
from src.domain.entities import Film, User

DEFAULT_PASSWORD = "SecurePass123!"


class RecordingNotificationSender(INotificationSender):
    """Captures reset links instead of emailing them"""

    def __init__(self):
        self.sent = []
        self.deliver = True

    async def send_password_reset(self, email, reset_link, first_name):
        self.sent.append({"email": email, "reset_link": reset_link, "first_name": first_name})
        return self.deliver

    @property
    def last_token(self):
        return self.sent[-1]["reset_link"].rsplit("/", 1)[1]


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def notification_sender():
    return RecordingNotificationSender()


@pytest.fixture
def app(db_session, notification_sender):
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notification_sender] = lambda: notification_sender
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def create_user(db_session):
    """
    Factory for persisted users.

    Returns (user_id, email) as plain strings; ORM instances expire when a
    request rolls the shared session back.
    """

    async def _create_user(
        email="ada@example.com", password=DEFAULT_PASSWORD, first_name="Ada", last_name="Lovelace"
    ):
        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=hash_password(password),
            age=36,
        )
        db_session.add(user)
        await db_session.commit()
        return str(user.id), email

    return _create_user


@pytest_asyncio.fixture
async def create_film(db_session):
    async def _create_film(
        name="Metropolis", genre="Sci-Fi", url="https://cdn.example.com/metropolis.m3u8"
    ):
        film = Film(name=name, genre=genre, url=url, description="Silent classic")
        db_session.add(film)
        await db_session.commit()
        return str(film.id)

    return _create_film


@pytest.fixture
def auth_headers(app):
    """Bearer header for a user, signed by the app's own token issuer"""

    def _auth_headers(user_id, email):
        token = app.state.token_issuer.issue(UUID(user_id), email)
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
