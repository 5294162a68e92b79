"""Request/response schemas for user endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, EmailStr, Field

from carcenter.schemas.common import CamelModel, not_blank


class UserCreateRequest(CamelModel):
    username: Annotated[str, Field(min_length=3, max_length=20, examples=["user123"]), AfterValidator(not_blank)]
    email: Annotated[EmailStr, Field(examples=["user@example.com"])]
    password: Annotated[str, Field(min_length=8, max_length=20, examples=["password123"]), AfterValidator(not_blank)]
    name: Annotated[str, Field(max_length=50, examples=["Hong Gildong"]), AfterValidator(not_blank)]
    phone: Annotated[str | None, Field(max_length=20, examples=["010-1234-5678"])] = None


class UserResponse(CamelModel):
    id: int
    username: str
    email: str
    name: str
    phone: str | None
    role: str
    enabled: bool
    created_at: datetime
    updated_at: datetime
