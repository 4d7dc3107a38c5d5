"""Naming conventions that decide which entries are route modules."""

from __future__ import annotations

SOURCE_SUFFIXES = frozenset({".py"})

# Stems ending in one of these kinds are supporting code, not routers.
SUPPORT_KINDS = (
    "controller",
    "service",
    "spec",
    "test",
    "dto",
    "middleware",
    "error",
    "decorator",
)

_EXCLUDED_PREFIXES = ("_", "@", ".")
_EXCLUDED_FILE_PREFIXES = ("test_",)
_KIND_SEPARATORS = (".", "_")


def is_route_name(name: str, *, is_directory: bool = False) -> bool:
    """Return whether an entry called *name* takes part in route discovery.

    Directories are always included, whatever their name, so the scanner
    walks into ``_shared/`` or ``@types/`` and filters what it finds there.
    Private (``_``), scoped (``@``) and hidden (``.``) files are excluded.
    Files must also carry a source suffix and must not name supporting code
    such as ``user.controller.py`` or ``user_service.py``.
    """

    if is_directory:
        return bool(name)
    if not name or name.startswith(_EXCLUDED_PREFIXES):
        return False

    stem, dot, suffix = name.rpartition(".")
    if not dot or not stem or f".{suffix}" not in SOURCE_SUFFIXES:
        return False
    if stem.startswith(_EXCLUDED_FILE_PREFIXES):
        return False
    return not any(
        stem.endswith(f"{separator}{kind}")
        for kind in SUPPORT_KINDS
        for separator in _KIND_SEPARATORS
    )


__all__ = ["SOURCE_SUFFIXES", "SUPPORT_KINDS", "is_route_name"]
