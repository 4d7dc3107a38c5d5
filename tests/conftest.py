"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from autoroute_backend.api.dependencies import get_product_service, get_user_service
from autoroute_backend.api.rate_limit import get_rate_limiter
from autoroute_backend.settings import get_settings

ROUTER_TEMPLATE = '''\
from fastapi import APIRouter

router = APIRouter()


@router.get("{path}")
def endpoint() -> dict[str, str]:
    return {{"module": "{label}"}}
'''


def router_source(label: str, path: str = "") -> str:
    """Source of a route module whose single GET endpoint reports *label*."""
    return ROUTER_TEMPLATE.format(label=label, path=path)


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.delenv("ROUTES_DIR", raising=False)
    monkeypatch.delenv("API_PREFIX", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_state() -> Iterator[None]:
    """Start every test with empty in-memory stores and rate-limit counters."""
    get_user_service().reset()
    get_product_service().reset()
    get_rate_limiter().reset()
    yield
    get_rate_limiter().reset()


@pytest.fixture
def router_code() -> Callable[..., str]:
    return router_source


@pytest.fixture
def write_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Materialize ``{relative path: source}`` under a fresh routes directory."""

    def _write(files: dict[str, str]) -> Path:
        root = tmp_path / "routes"
        root.mkdir(exist_ok=True)
        for relative, source in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(source, encoding="utf-8")
        return root

    return _write
