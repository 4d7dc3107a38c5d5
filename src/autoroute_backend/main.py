"""Autoroute API entrypoints."""

from __future__ import annotations

import logging
import sys

import uvicorn

from autoroute_backend.logging_config import configure_logging
from autoroute_backend.routing import RouteDiscoveryError, compose_routes
from autoroute_backend.settings import get_settings

logger = logging.getLogger(__name__)


def _run_uvicorn(*, reload: bool) -> None:
    """Start uvicorn with a consistent configuration."""
    config = get_settings()
    uvicorn.run(
        "autoroute_backend.api:create_api",
        factory=True,
        host=config.api_host,
        port=config.api_port,
        reload=reload,
        reload_dirs=[str(config.routes_dir)] if reload else None,
    )


def run_dev() -> None:
    """Run the development ASGI server with auto-reload."""
    _run_uvicorn(reload=True)


def run_prod() -> None:
    """Run the production ASGI server without auto-reload."""
    _run_uvicorn(reload=False)


def show_routes() -> int:
    """Print the mount table for the configured routes directory."""
    config = get_settings()
    configure_logging("WARNING")
    try:
        composed = compose_routes(config.routes_dir, prefix=config.api_prefix)
    except RouteDiscoveryError as exc:
        logger.error("%s", exc)
        return 1

    for mount in composed.mounts:
        print(f"{config.api_prefix + mount.prefix or '/':<40} {mount.source}")
    return 0


def main_show_routes() -> None:
    sys.exit(show_routes())
