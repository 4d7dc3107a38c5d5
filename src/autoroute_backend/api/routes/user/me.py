"""The calling user's own profile."""

from __future__ import annotations

from fastapi import APIRouter

from autoroute_backend.api.controllers import to_user_response
from autoroute_backend.api.dependencies import CurrentUserDep
from autoroute_backend.api.models import UserResponse

router = APIRouter(tags=["user"])


@router.get("", response_model=UserResponse)
def read_current_user(user: CurrentUserDep) -> UserResponse:
    return to_user_response(user)
