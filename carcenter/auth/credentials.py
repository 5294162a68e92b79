"""Username/password verification against the user store."""

from __future__ import annotations

import structlog

from carcenter.auth.jwt import AuthenticatedIdentity
from carcenter.auth.password import dummy_verify, verify_password
from carcenter.errors import Unauthorized
from carcenter.users.repository import UserRepository

logger = structlog.get_logger()


class CredentialVerifier:
    def __init__(self, users: UserRepository) -> None:
        self._users = users

    async def authenticate(self, username: str, password: str) -> AuthenticatedIdentity:
        """Return the identity for a matching, enabled account.

        Unknown username, wrong password and disabled account all raise the
        same ``Unauthorized``.
        """
        user = await self._users.find_by_username(username)

        if user is None:
            dummy_verify()
            logger.info("login_rejected", reason="unknown_user")
            raise Unauthorized()

        if not verify_password(password, user.password_hash):
            logger.info("login_rejected", reason="bad_password", user_id=user.id)
            raise Unauthorized()

        if not user.enabled:
            logger.info("login_rejected", reason="disabled", user_id=user.id)
            raise Unauthorized()

        return AuthenticatedIdentity(username=user.username, role=user.role)
