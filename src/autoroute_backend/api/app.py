"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from autoroute_backend.api.errors import register_error_handlers
from autoroute_backend.logging_config import configure_logging
from autoroute_backend.routing import compose_routes
from autoroute_backend.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)


def create_api(settings: BackendSettings | None = None) -> FastAPI:
    """Instantiate the application with every route module under ``routes_dir``.

    Discovery errors propagate so that the process refuses to start with an
    incomplete route table.
    """

    config = settings or get_settings()
    configure_logging(config.log_level)

    composed = compose_routes(config.routes_dir)

    app = FastAPI(
        title=config.api_title,
        version=config.api_version,
        docs_url=config.docs_url,
        openapi_url=config.openapi_url,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(composed.router, prefix=config.api_prefix)
    app.state.routes = composed
    logger.info("Serving %d route modules", len(composed.mounts))
    return app
