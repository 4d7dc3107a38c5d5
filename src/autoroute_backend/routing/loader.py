"""Import route modules and pull out their exported router."""

from __future__ import annotations

import importlib.util
import sys
from dataclasses import dataclass
from pathlib import Path

from fastapi import APIRouter

from autoroute_backend.routing.errors import LoadError

DEFAULT_ATTRIBUTE = "router"
DEFAULT_NAMESPACE = "autoroute_routes"


@dataclass(frozen=True, slots=True)
class LoadedModule:
    """A route module together with the router it exports."""

    source_path: Path
    router: APIRouter
    module_name: str


class ModuleLoader:
    """Loads route modules found below *root*.

    Each file is executed at most once per loader; later calls for the same
    path return the cached :class:`LoadedModule`. Use a fresh loader for
    every composition pass.
    """

    def __init__(
        self,
        root: str | Path,
        *,
        attribute: str = DEFAULT_ATTRIBUTE,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        self._root = Path(root).resolve()
        self._attribute = attribute
        self._namespace = namespace
        self._cache: dict[Path, LoadedModule] = {}

    def load(self, path: str | Path) -> LoadedModule:
        """Import *path* and return its router export.

        Raises:
            LoadError: If the module fails to import or its export is not an
                :class:`fastapi.APIRouter`.
        """

        source = Path(path).resolve()
        cached = self._cache.get(source)
        if cached is not None:
            return cached

        module_name = self._module_name(source)
        spec = importlib.util.spec_from_file_location(module_name, source)
        if spec is None or spec.loader is None:
            raise LoadError(source, "not an importable Python file")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            sys.modules.pop(module_name, None)
            raise LoadError(source, f"import failed: {exc!r}") from exc

        router = getattr(module, self._attribute, None)
        if not isinstance(router, APIRouter):
            sys.modules.pop(module_name, None)
            found = "nothing" if router is None else type(router).__name__
            raise LoadError(
                source,
                f"'{self._attribute}' must be an APIRouter, found {found}",
            )

        loaded = LoadedModule(source_path=source, router=router, module_name=module_name)
        self._cache[source] = loaded
        return loaded

    def _module_name(self, source: Path) -> str:
        # routes/user/index.py -> autoroute_routes.user.index
        # routes/user.me.py   -> autoroute_routes.user%2Eme
        try:
            relative = source.relative_to(self._root)
        except ValueError:
            relative = Path(source.name)
        parts = [
            part.replace("%", "%25").replace(".", "%2E")
            for part in relative.with_suffix("").parts
        ]
        return ".".join((self._namespace, *parts))


__all__ = ["DEFAULT_ATTRIBUTE", "LoadedModule", "ModuleLoader"]
