"""Errors raised while discovering and mounting route modules."""

from __future__ import annotations

from pathlib import Path


class RouteDiscoveryError(Exception):
    """Base class for failures that abort a composition pass."""


class ScanError(RouteDiscoveryError):
    """Raised when a directory of the route tree cannot be listed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot scan route directory {path}: {reason}")
        self.path = path
        self.reason = reason


class LoadError(RouteDiscoveryError):
    """Raised when a route module does not yield a usable router."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load route module {path}: {reason}")
        self.path = path
        self.reason = reason


class CollisionError(RouteDiscoveryError):
    """Raised when two route modules derive the same mount path."""

    def __init__(
        self,
        mount_path: tuple[str, ...],
        first_source: Path,
        second_source: Path,
    ) -> None:
        url = "/" + "/".join(mount_path)
        super().__init__(
            f"Duplicate mount path {url!r}: defined in {first_source} "
            f"and {second_source}"
        )
        self.mount_path = mount_path
        self.first_source = first_source
        self.second_source = second_source


__all__ = ["CollisionError", "LoadError", "RouteDiscoveryError", "ScanError"]
