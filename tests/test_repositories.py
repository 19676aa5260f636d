"""
Repository tests - store behaviour against the in-memory database.
"""

import warnings

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import SADeprecationWarning
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import configure_mappers

from marketplace.core.exceptions import DuplicateLogin
from marketplace.db.models import Ad, User
from marketplace.db.repositories import AdRepository, UserRepository


@pytest.mark.asyncio
async def test_add_user_assigns_id(session: AsyncSession):
    user = await UserRepository(session).add(User(login="storeuser", password_hash="hash"))
    assert user.id is not None
    found = await UserRepository(session).get_by_login("storeuser")
    assert found is not None and found.id == user.id


@pytest.mark.asyncio
async def test_add_same_login_twice_is_duplicate(session: AsyncSession):
    repo = UserRepository(session)
    await repo.add(User(login="dupuser", password_hash="first"))
    with pytest.raises(DuplicateLogin) as exc_info:
        await repo.add(User(login="dupuser", password_hash="second"))
    assert exc_info.value.login == "dupuser"
    assert exc_info.value.status_code == 409


@pytest.mark.asyncio
async def test_get_ads_joins_author_login(session: AsyncSession, seeded_ads):
    rows = await AdRepository(session).get_ads(sort_by="price", sort_order="asc", limit=2)
    assert [(row.title, row.author_login) for row in rows] == [("Lamp", "otheruser"), ("Desk", "otheruser")]


def test_models_configure_without_deprecation_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error", SADeprecationWarning)
        configure_mappers()
    assert not inspect(User).relationships
    assert not inspect(Ad).relationships
