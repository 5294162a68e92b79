"""Tests for user management endpoints."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from tests.conftest import make_auth_headers, store_user

NEW_USER = {
    "username": "charlie",
    "email": "charlie@example.com",
    "password": "password123",
    "name": "Charlie Park",
    "phone": "010-1234-5678",
}


@pytest.mark.asyncio
async def test_requires_token(client: AsyncClient):
    assert (await client.get("/api/users")).status_code == 401
    assert (await client.get("/api/users/1")).status_code == 401
    assert (await client.post("/api/users", json=NEW_USER)).status_code == 401


@pytest.mark.asyncio
async def test_create_user(app, client: AsyncClient):
    resp = await client.post("/api/users", json=NEW_USER, headers=make_auth_headers(app))

    assert resp.status_code == 201
    data = resp.json()
    assert data["id"] > 0
    assert data["username"] == "charlie"
    assert data["name"] == "Charlie Park"
    assert data["phone"] == "010-1234-5678"
    assert data["role"] == "USER"
    assert data["enabled"] is True
    assert "createdAt" in data and "updatedAt" in data
    assert "password" not in data
    assert "passwordHash" not in data


@pytest.mark.asyncio
async def test_created_user_can_log_in(app, client: AsyncClient):
    await client.post("/api/users", json=NEW_USER, headers=make_auth_headers(app))

    resp = await client.post(
        "/api/auth/login",
        json={"username": "charlie", "password": "password123"},
    )

    assert resp.status_code == 200
    assert resp.json()["username"] == "charlie"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field",
    ["username", "email"],
)
async def test_create_duplicate(app, client: AsyncClient, field):
    await store_user(app, username="charlie", email="charlie@example.com")
    body = dict(NEW_USER, username="other", email="other@example.com")
    body[field] = NEW_USER[field]

    resp = await client.post("/api/users", json=body, headers=make_auth_headers(app))

    assert resp.status_code == 409
    assert resp.json()["code"] == "duplicate_user"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "override",
    [
        {"username": "ab"},
        {"username": "a" * 21},
        {"email": "not-an-email"},
        {"password": "short"},
        {"password": "p" * 21},
        {"name": "   "},
        {"name": "n" * 51},
        {"phone": "0" * 21},
    ],
)
async def test_create_invalid(app, client: AsyncClient, override):
    body = dict(NEW_USER, **override)

    resp = await client.post("/api/users", json=body, headers=make_auth_headers(app))

    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_get_user(app, client: AsyncClient):
    user = await store_user(app, username="alice", phone="010-0000-0000")

    resp = await client.get(f"/api/users/{user.id}", headers=make_auth_headers(app))

    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == user.id
    assert data["username"] == "alice"
    assert data["phone"] == "010-0000-0000"


@pytest.mark.asyncio
async def test_get_user_not_found(app, client: AsyncClient):
    resp = await client.get("/api/users/999", headers=make_auth_headers(app))

    assert resp.status_code == 404
    assert resp.json()["code"] == "not_found"


@pytest.mark.asyncio
async def test_list_users(app, client: AsyncClient):
    await store_user(app, username="alice")
    await store_user(app, username="bob")

    resp = await client.get("/api/users", headers=make_auth_headers(app))

    assert resp.status_code == 200
    assert [u["username"] for u in resp.json()] == ["alice", "bob"]


@pytest.mark.asyncio
async def test_list_users_empty(app, client: AsyncClient):
    resp = await client.get("/api/users", headers=make_auth_headers(app))

    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("user_id", ["0", "-1", "99999999999999999999999", str(2**63)])
async def test_get_user_id_out_of_range(app, client: AsyncClient, user_id):
    resp = await client.get(f"/api/users/{user_id}", headers=make_auth_headers(app))

    assert resp.status_code == 400
    assert resp.json()["code"] == "validation_error"
