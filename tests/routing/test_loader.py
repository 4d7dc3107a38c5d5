from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi import APIRouter

from autoroute_backend.routing import LoadError, ModuleLoader


def test_load_returns_exported_router(write_tree, router_code) -> None:
    root = write_tree({"user/index.py": router_code("user")})
    loader = ModuleLoader(root)

    loaded = loader.load(root / "user" / "index.py")

    assert isinstance(loaded.router, APIRouter)
    assert loaded.source_path == (root / "user" / "index.py").resolve()
    assert loaded.module_name == "autoroute_routes.user.index"
    assert sys.modules[loaded.module_name].router is loaded.router


def test_loading_twice_executes_module_once(write_tree, tmp_path: Path) -> None:
    marker = tmp_path / "executions.log"
    source = (
        "from pathlib import Path\n"
        "from fastapi import APIRouter\n"
        f"with Path({str(marker)!r}).open('a') as handle:\n"
        "    handle.write('run\\n')\n"
        "router = APIRouter()\n"
    )
    root = write_tree({"counted.py": source})
    loader = ModuleLoader(root)

    first = loader.load(root / "counted.py")
    second = loader.load(str(root / "counted.py"))

    assert first is second
    assert marker.read_text().splitlines() == ["run"]


def test_fresh_loader_reexecutes_module(write_tree, router_code) -> None:
    root = write_tree({"index.py": router_code("root", "/")})

    first = ModuleLoader(root).load(root / "index.py")
    second = ModuleLoader(root).load(root / "index.py")

    assert first.router is not second.router


def test_missing_export_raises_load_error(write_tree) -> None:
    root = write_tree({"empty.py": "VALUE = 1\n"})

    with pytest.raises(LoadError) as exc_info:
        ModuleLoader(root).load(root / "empty.py")

    assert exc_info.value.path == (root / "empty.py").resolve()
    assert "found nothing" in str(exc_info.value)
    assert "autoroute_routes.empty" not in sys.modules


def test_non_router_export_raises_load_error(write_tree) -> None:
    root = write_tree({"bogus.py": "router = {'get': '/'}\n"})

    with pytest.raises(LoadError, match="found dict") as exc_info:
        ModuleLoader(root).load(root / "bogus.py")

    assert exc_info.value.path == (root / "bogus.py").resolve()


def test_custom_export_attribute(write_tree) -> None:
    source = "from fastapi import APIRouter\n\nendpoints = APIRouter()\n"
    root = write_tree({"custom.py": source})

    loaded = ModuleLoader(root, attribute="endpoints").load(root / "custom.py")

    assert isinstance(loaded.router, APIRouter)
    with pytest.raises(LoadError, match="'router' must be an APIRouter"):
        ModuleLoader(root).load(root / "custom.py")


def test_import_failure_raises_load_error(write_tree) -> None:
    root = write_tree({"broken.py": "raise RuntimeError('boom')\n"})

    with pytest.raises(LoadError, match="boom") as exc_info:
        ModuleLoader(root).load(root / "broken.py")

    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert "autoroute_routes.broken" not in sys.modules


def test_dotted_stem_and_nested_module_get_distinct_names(write_tree, router_code) -> None:
    root = write_tree(
        {"user/me.py": router_code("nested"), "user.me.py": router_code("dotted")}
    )
    loader = ModuleLoader(root)

    nested = loader.load(root / "user" / "me.py")
    dotted = loader.load(root / "user.me.py")

    assert nested.module_name == "autoroute_routes.user.me"
    assert dotted.module_name == "autoroute_routes.user%2Eme"
    assert sys.modules[nested.module_name].router is nested.router
    assert sys.modules[dotted.module_name].router is dotted.router
