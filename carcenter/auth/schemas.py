"""Request/response schemas for authentication endpoints."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import AfterValidator

from carcenter.schemas.common import CamelModel, not_blank

NonBlank = Annotated[str, AfterValidator(not_blank)]


class LoginRequest(CamelModel):
    username: NonBlank
    password: NonBlank


class RefreshTokenRequest(CamelModel):
    refresh_token: NonBlank


class LoginResponse(CamelModel):
    """Token pair plus a snapshot of the user's profile at issuance time."""

    access_token: str
    refresh_token: str
    token_type: Literal["Bearer"] = "Bearer"
    expires_in: int
    username: str
    email: str
    role: str
