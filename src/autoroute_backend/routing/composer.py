"""Assemble loaded routers into one mount tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from fastapi import APIRouter
from fastapi.exceptions import FastAPIError

from autoroute_backend.routing.errors import CollisionError, LoadError
from autoroute_backend.routing.loader import LoadedModule
from autoroute_backend.routing.paths import MountPath, mount_prefix


@dataclass(frozen=True, slots=True)
class Mount:
    """One row of the mount table, in mount order."""

    path: MountPath
    prefix: str
    source: Path


@dataclass(slots=True)
class MountNode:
    """A node of the composed tree.

    Intermediate nodes carry no router of their own. ``order`` records when a
    router was attached so that rebuilding any subtree preserves the order in
    which the scanner produced its modules.
    """

    path: MountPath = ()
    router: APIRouter | None = None
    source: Path | None = None
    order: int | None = None
    children: dict[str, MountNode] = field(default_factory=dict)

    def iter_mounts(self) -> Iterator[Mount]:
        """Yield the attached routers of this subtree in mount order."""

        attached = sorted(self._attached(), key=lambda node: node.order)
        for node in attached:
            yield Mount(path=node.path, prefix=mount_prefix(node.path), source=node.source)

    def build_router(self, prefix: str = "") -> APIRouter:
        """Return a fresh router that includes every router of this subtree.

        Paths are relative to this node, joined under *prefix*, so a subtree
        can be built on its own and handed to a higher caller.

        Raises:
            LoadError: If FastAPI rejects a router at its mount point, such as
                an empty route path mounted under an empty prefix.
        """

        composed = APIRouter()
        depth = len(self.path)
        for node in sorted(self._attached(), key=lambda item: item.order):
            relative = mount_prefix(node.path[depth:])
            try:
                composed.include_router(node.router, prefix=prefix + relative)
            except FastAPIError as exc:
                raise LoadError(node.source, str(exc)) from exc
        return composed

    def _attached(self) -> Iterator[MountNode]:
        if self.router is not None:
            yield self
        for child in self.children.values():
            yield from child._attached()


class RouterComposer:
    """Builds a :class:`MountNode` tree from ``(MountPath, LoadedModule)`` pairs."""

    def __init__(self) -> None:
        self.root = MountNode()
        self._sequence = 0

    def mount(self, path: MountPath, loaded: LoadedModule) -> MountNode:
        """Attach *loaded* at *path*, creating intermediate nodes as needed.

        Raises:
            CollisionError: If another module already occupies *path*.
        """

        node = self.root
        for depth, segment in enumerate(path, start=1):
            child = node.children.get(segment)
            if child is None:
                child = MountNode(path=path[:depth])
                node.children[segment] = child
            node = child

        if node.router is not None:
            raise CollisionError(path, node.source, loaded.source_path)

        node.router = loaded.router
        node.source = loaded.source_path
        node.order = self._sequence
        self._sequence += 1
        return node

    def build_router(self, prefix: str = "") -> APIRouter:
        """Materialize the whole tree as one router."""

        return self.root.build_router(prefix)


__all__ = ["Mount", "MountNode", "RouterComposer"]
