"""User collection endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from autoroute_backend.api.controllers import to_user_list_response, to_user_response
from autoroute_backend.api.dependencies import UserServiceDep
from autoroute_backend.api.models import (
    UserCreateRequest,
    UserListResponse,
    UserResponse,
)

router = APIRouter(tags=["user"])


@router.get("", response_model=UserListResponse)
def list_users(user_service: UserServiceDep) -> UserListResponse:
    """List registered users in creation order."""

    return to_user_list_response(user_service.list_users())


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreateRequest, user_service: UserServiceDep
) -> UserResponse:
    """Register a new user."""

    user = user_service.create_user(
        nickname=payload.nickname, display_name=payload.display_name
    )
    return to_user_response(user)
