"""User management: create, fetch one, list all."""

from __future__ import annotations

import structlog

from carcenter.auth.password import hash_password
from carcenter.db.models import User
from carcenter.errors import DuplicateUser, ResourceNotFound
from carcenter.users.repository import UserRepository
from carcenter.users.schemas import UserCreateRequest, UserResponse

logger = structlog.get_logger()

DEFAULT_ROLE = "USER"


def to_response(user: User) -> UserResponse:
    return UserResponse.model_validate(user, from_attributes=True)


class UserService:
    def __init__(self, users: UserRepository) -> None:
        self._users = users

    async def create_user(self, request: UserCreateRequest, role: str = DEFAULT_ROLE) -> UserResponse:
        """Store a new enabled account. Raises ``DuplicateUser`` on a taken username or email."""
        if await self._users.find_by_username(request.username) is not None:
            raise DuplicateUser("Username already exists")
        if await self._users.find_by_email(request.email) is not None:
            raise DuplicateUser("Email already exists")

        user = User(
            username=request.username,
            email=request.email,
            password_hash=hash_password(request.password),
            name=request.name,
            phone=request.phone,
            role=role,
            enabled=True,
        )
        # The unique constraints still catch a concurrent insert of the same name.
        user = await self._users.save(user)

        logger.info("user_created", user_id=user.id, username=user.username, role=user.role)
        return to_response(user)

    async def get_user(self, user_id: int) -> UserResponse:
        user = await self._users.find_by_id(user_id)
        if user is None:
            raise ResourceNotFound("User not found")
        return to_response(user)

    async def get_users(self) -> list[UserResponse]:
        return [to_response(u) for u in await self._users.find_all()]
