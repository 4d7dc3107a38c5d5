"""Rate-limited user statistics."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from autoroute_backend.api.dependencies import UserServiceDep, default_rate_limit

router = APIRouter(tags=["user"])


@router.get("", dependencies=[Depends(default_rate_limit("user_router1"))])
def read_user_stats(user_service: UserServiceDep) -> dict[str, int]:
    """Return the number of registered users."""

    return {"total": len(user_service.list_users())}
