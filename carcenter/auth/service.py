"""Login, refresh and logout orchestration."""

from __future__ import annotations

import structlog

from carcenter.auth.credentials import CredentialVerifier
from carcenter.auth.jwt import REFRESH, AuthenticatedIdentity, TokenService
from carcenter.auth.schemas import LoginRequest, LoginResponse, RefreshTokenRequest
from carcenter.db.models import User
from carcenter.errors import InvalidToken, UserNotFound
from carcenter.users.repository import UserRepository

logger = structlog.get_logger()


class AuthService:
    """Issue session tokens for verified credentials and valid refresh tokens."""

    def __init__(
        self,
        verifier: CredentialVerifier,
        tokens: TokenService,
        users: UserRepository,
    ) -> None:
        self._verifier = verifier
        self._tokens = tokens
        self._users = users

    async def login(self, request: LoginRequest) -> LoginResponse:
        identity = await self._verifier.authenticate(request.username, request.password)

        user = await self._users.find_by_username(identity.username)
        if user is None:
            raise UserNotFound(identity.username)

        access_token = self._tokens.issue_access_token(identity)
        refresh_token = self._tokens.issue_refresh_token(identity.username)

        logger.info("user_login", user_id=user.id, username=user.username, role=user.role)
        return self._response(user, access_token, refresh_token)

    async def refresh_token(self, request: RefreshTokenRequest) -> LoginResponse:
        """Mint a new access token; the refresh token is returned unchanged."""
        if not self._tokens.validate(request.refresh_token, REFRESH):
            raise InvalidToken("Invalid refresh token")

        username = self._tokens.subject_of(request.refresh_token, REFRESH)
        user = await self._users.find_by_username(username)
        if user is None:
            raise UserNotFound(username)

        access_token = self._tokens.issue_access_token(
            AuthenticatedIdentity(username=user.username, role=user.role),
        )

        logger.info("token_refreshed", user_id=user.id, username=user.username)
        return self._response(user, access_token, request.refresh_token)

    async def logout(self, identity: AuthenticatedIdentity) -> None:
        """Acknowledge a logout.

        Tokens are not revoked: the access token stays valid until it
        expires, and so does the refresh token.
        """
        logger.info("user_logout", username=identity.username)

    def _response(self, user: User, access_token: str, refresh_token: str) -> LoginResponse:
        return LoginResponse(
            access_token=access_token,
            refresh_token=refresh_token,
            token_type="Bearer",
            expires_in=self._tokens.access_token_expires_in,
            username=user.username,
            email=user.email,
            role=user.role,
        )
