"""Authentication endpoints: login, refresh, logout."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from carcenter.auth.bearer import CurrentUser
from carcenter.auth.schemas import LoginRequest, LoginResponse, RefreshTokenRequest
from carcenter.auth.service import AuthService
from carcenter.deps import get_auth_service

router = APIRouter(prefix="/auth", tags=["Authentication"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"description": "Malformed request body"},
    status.HTTP_401_UNAUTHORIZED: {"description": "Authentication failed"},
}


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in",
    responses=_ERROR_RESPONSES,
)
async def login(
    body: LoginRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Authenticate with username + password, receive JWT tokens."""
    return await auth.login(body)


@router.post(
    "/refresh",
    response_model=LoginResponse,
    summary="Refresh the access token",
    responses=_ERROR_RESPONSES,
)
async def refresh(
    body: RefreshTokenRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Exchange a refresh token for a new access token. The refresh token is echoed back."""
    return await auth.refresh_token(body)


@router.post(
    "/logout",
    summary="Log out",
    response_class=Response,
    responses={status.HTTP_401_UNAUTHORIZED: {"description": "Authentication required"}},
)
async def logout(
    user: CurrentUser,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Acknowledge logout. Issued tokens remain valid until they expire."""
    await auth.logout(user)
    return Response(status_code=status.HTTP_200_OK)
