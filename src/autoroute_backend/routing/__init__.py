"""Convention-based discovery and mounting of route modules."""

from autoroute_backend.routing.composer import Mount, MountNode, RouterComposer
from autoroute_backend.routing.discovery import ComposedRoutes, compose_routes
from autoroute_backend.routing.errors import (
    CollisionError,
    LoadError,
    RouteDiscoveryError,
    ScanError,
)
from autoroute_backend.routing.loader import LoadedModule, ModuleLoader
from autoroute_backend.routing.naming import is_route_name
from autoroute_backend.routing.paths import MountPath, derive_mount_path, mount_prefix
from autoroute_backend.routing.scanner import RouteEntry, scan_routes

__all__ = [
    "CollisionError",
    "ComposedRoutes",
    "LoadError",
    "LoadedModule",
    "ModuleLoader",
    "Mount",
    "MountNode",
    "MountPath",
    "RouteDiscoveryError",
    "RouteEntry",
    "RouterComposer",
    "ScanError",
    "compose_routes",
    "derive_mount_path",
    "is_route_name",
    "mount_prefix",
    "scan_routes",
]
