"""FastAPI dependency that authenticates ``Authorization: Bearer`` access tokens."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from carcenter.auth.jwt import ACCESS, AuthenticatedIdentity, TokenService
from carcenter.deps import get_token_service
from carcenter.errors import InvalidToken, Unauthorized

# auto_error=False so a missing header is rendered by our own 401 handler.
_bearer_scheme = HTTPBearer(auto_error=False, bearerFormat="JWT")


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer_scheme)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthenticatedIdentity:
    """Decode the bearer access token and return its identity."""
    if credentials is None:
        raise Unauthorized("Not authenticated")

    claims = tokens.claims_of(credentials.credentials, ACCESS)
    role = claims.get("role")
    if not isinstance(role, str):
        raise InvalidToken()

    return AuthenticatedIdentity(username=claims["sub"], role=role)


CurrentUser = Annotated[AuthenticatedIdentity, Depends(get_current_user)]
