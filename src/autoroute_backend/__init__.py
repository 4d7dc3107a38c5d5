"""Autoroute backend package wiring and entrypoints."""

from autoroute_backend.main import main_show_routes, run_dev, run_prod
from autoroute_backend.settings import BackendSettings, get_settings

main = run_dev

__all__ = [
    "BackendSettings",
    "get_settings",
    "main",
    "main_show_routes",
    "run_dev",
    "run_prod",
]
