"""
Pytest fixtures - in-memory database, HTTP client, users and ads.
"""

import os

# Must be set before marketplace modules read their settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("CREATE_TABLES", "false")

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from marketplace.core.security import create_access_token, hash_password
from marketplace.db.base import Base
from marketplace.db.models import Ad, User
from marketplace.db.session import get_db
from marketplace.main import app

# One shared in-memory SQLite connection per test: fresh schema every time
TEST_DATABASE_URL = "sqlite+aiosqlite://"

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


async def _create_user(session: AsyncSession, login: str, password: str) -> User:
    user = User(login=login, password_hash=hash_password(password))
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest_asyncio.fixture
async def test_user(session: AsyncSession) -> User:
    return await _create_user(session, "testuser", "password123")


@pytest_asyncio.fixture
async def other_user(session: AsyncSession) -> User:
    return await _create_user(session, "otheruser", "password456")


@pytest.fixture
def auth_headers(test_user: User) -> dict:
    token = create_access_token(test_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def seeded_ads(session: AsyncSession, test_user: User, other_user: User) -> list[Ad]:
    """Four ads: prices 300/100/400/200, created one hour apart in that order."""
    specs = [
        ("Bike", 300.0, test_user),
        ("Lamp", 100.0, other_user),
        ("Sofa", 400.0, test_user),
        ("Desk", 200.0, other_user),
    ]
    ads = []
    for i, (title, price, author) in enumerate(specs):
        ad = Ad(
            title=title,
            description=f"{title} in good condition",
            image_url=f"http://example.com/{title.lower()}.jpg",
            price=price,
            author_id=author.id,
            created_at=BASE_TIME + timedelta(hours=i),
        )
        session.add(ad)
        ads.append(ad)
    await session.commit()
    for ad in ads:
        await session.refresh(ad)
    return ads
