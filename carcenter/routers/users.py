"""User management endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from carcenter.auth.bearer import get_current_user
from carcenter.deps import get_user_service
from carcenter.users.schemas import UserCreateRequest, UserResponse
from carcenter.users.service import UserService

# Upper bound of the BIGINT primary key.
MAX_USER_ID = 2**63 - 1

router = APIRouter(
    prefix="/users",
    tags=["User"],
    dependencies=[Depends(get_current_user)],
    responses={status.HTTP_401_UNAUTHORIZED: {"description": "Authentication required"}},
)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Invalid request data"},
        status.HTTP_409_CONFLICT: {"description": "Username or email already exists"},
    },
)
async def create_user(
    body: UserCreateRequest,
    users: Annotated[UserService, Depends(get_user_service)],
):
    return await users.create_user(body)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get a user by id",
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
async def get_user(
    user_id: Annotated[int, Path(description="User id", ge=1, le=MAX_USER_ID)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    return await users.get_user(user_id)


@router.get("", response_model=list[UserResponse], summary="List users")
async def get_users(
    users: Annotated[UserService, Depends(get_user_service)],
):
    return await users.get_users()
