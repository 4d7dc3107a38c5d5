"""One composition pass: scan, filter, load, derive and mount."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from fastapi import APIRouter

from autoroute_backend.routing.composer import Mount, MountNode, RouterComposer
from autoroute_backend.routing.loader import DEFAULT_ATTRIBUTE, ModuleLoader
from autoroute_backend.routing.paths import derive_mount_path
from autoroute_backend.routing.scanner import scan_routes

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ComposedRoutes:
    """Result of a successful composition pass.

    Attributes:
        root: Root of the mount tree.
        router: Router ready for ``FastAPI.include_router``.
        mounts: Mounted modules in mount order.
    """

    root: MountNode
    router: APIRouter
    mounts: tuple[Mount, ...]


def compose_routes(
    root: str | Path,
    *,
    prefix: str = "",
    attribute: str = DEFAULT_ATTRIBUTE,
) -> ComposedRoutes:
    """Discover the route modules under *root* and compose them.

    Either every module is mounted and a result is returned, or a
    :class:`~autoroute_backend.routing.errors.RouteDiscoveryError` propagates
    and nothing is published. Calling again performs an independent rescan.
    """

    routes_dir = Path(root).resolve()
    loader = ModuleLoader(routes_dir, attribute=attribute)
    composer = RouterComposer()

    for entry in scan_routes(routes_dir):
        if entry.is_directory:
            continue
        loaded = loader.load(entry.absolute_path)
        mount_path = derive_mount_path(entry.relative_segments)
        composer.mount(mount_path, loaded)
        logger.info(
            "Mounted %s at %r", entry.absolute_path, "/" + "/".join(mount_path)
        )

    router = composer.build_router(prefix)
    mounts = tuple(composer.root.iter_mounts())
    logger.info("Composed %d route modules from %s", len(mounts), routes_dir)
    return ComposedRoutes(root=composer.root, router=router, mounts=mounts)


__all__ = ["ComposedRoutes", "compose_routes"]
