"""Mapping from a position in the route tree to a URL mount path."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import PurePath

MountPath = tuple[str, ...]

INDEX_NAME = "index"


def derive_mount_path(
    segments: Sequence[str], *, is_directory: bool = False
) -> MountPath:
    """Derive the mount path for the entry at *segments*.

    ``index.py``            -> ``()``
    ``user/index.py``       -> ``("user",)``
    ``user/user_router1.py`` -> ``("user", "user_router1")``

    Directory names and file stems are kept verbatim, so a ``{user_id}``
    directory becomes a path parameter.
    """

    if not segments:
        return ()
    *parents, last = segments
    if is_directory:
        return (*parents, last)

    name = last.removesuffix(PurePath(last).suffix)
    if name == INDEX_NAME:
        return tuple(parents)
    return (*parents, name)


def mount_prefix(path: MountPath) -> str:
    """Render *path* as an ``include_router`` prefix (``""`` for the root)."""

    if not path:
        return ""
    return "/" + "/".join(path)


__all__ = ["INDEX_NAME", "MountPath", "derive_mount_path", "mount_prefix"]
