"""Async repository over the ``users`` table."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from carcenter.db.models import User
from carcenter.errors import DuplicateUser


class UserRepository:
    """Lookups return ``None`` for a missing row; writes commit immediately."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, user: User) -> User:
        self._session.add(user)
        try:
            await self._session.commit()
        except IntegrityError:
            await self._session.rollback()
            raise DuplicateUser()
        await self._session.refresh(user)
        return user

    async def find_by_id(self, user_id: int) -> User | None:
        result = await self._session.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def find_all(self) -> list[User]:
        result = await self._session.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def update(self, user: User) -> User:
        merged = await self._session.merge(user)
        try:
            await self._session.commit()
        except IntegrityError:
            await self._session.rollback()
            raise DuplicateUser()
        await self._session.refresh(merged)
        return merged

    async def delete_by_id(self, user_id: int) -> None:
        await self._session.execute(delete(User).where(User.id == user_id))
        await self._session.commit()

    async def find_by_email(self, email: str) -> User | None:
        result = await self._session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def find_by_username(self, username: str) -> User | None:
        result = await self._session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()
