"""Service root."""

from __future__ import annotations

from fastapi import APIRouter

from autoroute_backend.settings import get_settings

router = APIRouter(tags=["root"])


@router.get("/")
def read_root() -> dict[str, str]:
    """Report the service name and version."""

    settings = get_settings()
    return {"service": settings.api_title, "version": settings.api_version}
