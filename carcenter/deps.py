"""FastAPI dependency-injection helpers: sessions, repositories and services."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from carcenter.auth.credentials import CredentialVerifier
from carcenter.auth.jwt import TokenService
from carcenter.auth.service import AuthService
from carcenter.users.repository import UserRepository
from carcenter.users.service import UserService


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with request.app.state.db.session() as session:
        yield session


def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> UserRepository:
    return UserRepository(session)


def get_auth_service(
    users: Annotated[UserRepository, Depends(get_user_repository)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    return AuthService(CredentialVerifier(users), tokens, users)


def get_user_service(
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> UserService:
    return UserService(users)
