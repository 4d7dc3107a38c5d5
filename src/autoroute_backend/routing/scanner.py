"""Depth-first walk over a route tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from autoroute_backend.routing.errors import ScanError
from autoroute_backend.routing.naming import is_route_name


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A filesystem entry that survived the naming filter.

    Attributes:
        absolute_path: Resolved location of the entry on disk.
        relative_segments: Entry names from the scan root down to the entry.
        is_directory: Whether the entry is a directory.
    """

    absolute_path: Path
    relative_segments: tuple[str, ...]
    is_directory: bool


def scan_routes(root: str | Path) -> Iterator[RouteEntry]:
    """Yield the route entries below *root* in lexicographic depth-first order.

    Directories are yielded right before their first included descendant and
    not at all when nothing below them is included. The walk is lazy, so a
    :class:`ScanError` for an unreadable subdirectory surfaces while the
    caller iterates.
    """

    directory = Path(root).resolve()
    if not directory.is_dir():
        raise ScanError(directory, "not a directory")
    return _walk(directory, ())


def _walk(directory: Path, segments: tuple[str, ...]) -> Iterator[RouteEntry]:
    for child in _list_directory(directory):
        child_segments = (*segments, child.name)
        if child.is_dir():
            if not is_route_name(child.name, is_directory=True):
                continue
            nested = _walk(child, child_segments)
            first = next(nested, None)
            if first is None:
                continue
            yield RouteEntry(child, child_segments, is_directory=True)
            yield first
            yield from nested
        elif is_route_name(child.name):
            yield RouteEntry(child, child_segments, is_directory=False)


def _list_directory(directory: Path) -> list[Path]:
    """Return the children of *directory* sorted by name."""

    try:
        return sorted(directory.iterdir(), key=lambda item: item.name)
    except OSError as exc:
        raise ScanError(directory, exc.strerror or str(exc)) from exc


__all__ = ["RouteEntry", "scan_routes"]
