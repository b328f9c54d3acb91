# symphony/portal/main.py
"""
Symphony portal application factory.

Creates a FastAPI application serving the federation site list. Settings
are validated once here; a missing ``SYMPHONY_API`` stops startup with a
``ConfigurationError``.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from symphony.portal.api.discovery import router as discovery_router
from symphony.portal.api.errors import register_exception_handlers
from symphony.portal.api.sites import router as sites_router
from symphony.portal.core.auth.session import create_session_provider
from symphony.portal.core.config import Settings, settings as default_settings
from symphony.portal.core.logging import configure_logging
from symphony.portal.core.sites.fetcher import SiteFetcher
from symphony.portal.core.sites.service import SitesService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Portal started, registry at %s", app.state.site_fetcher.url)
    yield
    logger.info("Portal stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and wire the portal FastAPI application."""
    settings = settings or default_settings
    configure_logging(settings.log_level, json_format=settings.log_json)
    logger.info("Creating portal application (env=%s)", settings.app_env)

    registry = settings.registry_config()
    fetcher = SiteFetcher(registry)
    session_provider = create_session_provider(settings, registry)

    app = FastAPI(
        title="Symphony Portal",
        version="0.1.0",
        description="Federation sites for Eclipse Symphony",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.site_fetcher = fetcher
    app.state.session_provider = session_provider
    app.state.anonymous_as_service = settings.symphony_anonymous_as_service
    app.state.sites_service = SitesService(
        fetcher=fetcher,
        session_provider=session_provider,
    )

    app.include_router(discovery_router)
    app.include_router(sites_router)
    register_exception_handlers(app)

    return app
