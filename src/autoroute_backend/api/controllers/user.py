"""Conversions between stored users and their API representation."""

from __future__ import annotations

from autoroute_backend.api.models import UserListResponse, UserResponse
from autoroute_backend.api.services import UserRecord


def to_user_response(user: UserRecord) -> UserResponse:
    return UserResponse.model_validate(user, from_attributes=True)


def to_user_list_response(users: list[UserRecord]) -> UserListResponse:
    return UserListResponse(
        items=[to_user_response(user) for user in users], total=len(users)
    )
