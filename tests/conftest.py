"""Shared test fixtures for the API."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from carcenter.app import create_app
from carcenter.auth.jwt import AuthenticatedIdentity
from carcenter.auth.password import hash_password
from carcenter.config import Settings
from carcenter.db.models import User
from carcenter.users.repository import UserRepository


def _test_settings(**overrides) -> Settings:
    """Create Settings with test defaults."""
    defaults = {
        "database_url": "sqlite+aiosqlite://",
        "jwt_secret": "test-secret",
    }
    defaults.update(overrides)
    return Settings(**defaults)


@pytest.fixture
def settings():
    return _test_settings()


@pytest.fixture
async def app(settings):
    """Application backed by a fresh in-memory database. Lifespan is not started."""
    application = create_app(settings)
    await application.state.db.create_all()
    yield application
    await application.state.db.close()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def session(app):
    async with app.state.db.session() as s:
        yield s


@pytest.fixture
def repo(session):
    return UserRepository(session)


def make_user(
    username="alice",
    password="correct",
    *,
    email=None,
    name="Alice Kim",
    phone=None,
    role="USER",
    enabled=True,
) -> User:
    return User(
        username=username,
        email=email or f"{username}@example.com",
        password_hash=hash_password(password),
        name=name,
        phone=phone,
        role=role,
        enabled=enabled,
    )


async def store_user(app, **kwargs) -> User:
    """Insert a user through a short-lived session and return it."""
    async with app.state.db.session() as s:
        return await UserRepository(s).save(make_user(**kwargs))


async def delete_user(app, username: str) -> None:
    async with app.state.db.session() as s:
        repo = UserRepository(s)
        user = await repo.find_by_username(username)
        await repo.delete_by_id(user.id)


def make_auth_headers(app, username="admin", role="ADMIN") -> dict:
    token = app.state.tokens.issue_access_token(AuthenticatedIdentity(username=username, role=role))
    return {"Authorization": f"Bearer {token}"}
