"""
FastAPI application factory.
create_app() is the single entry point for building the app.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import sentry_sdk
from fastapi import FastAPI

from config import AppSettings
from errors import register_error_handlers
from infrastructure.http_client import HttpClient
from infrastructure.model_client import ModelClient
from platforms.bindings import default_platforms
from providers.eth import build_eth_providers
from providers.registry import Providers
from routes.health_routes import router as health_router
from routes.verify_routes import router as verify_router
from services.account_analysis import AccountAnalysisFetcher
from shared.logging import setup_logging


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Create and return a fully configured FastAPI application."""
    if settings is None:
        settings = AppSettings()

    setup_logging(settings.logging)

    # Initialise Sentry before anything else so it captures startup errors
    if settings.sentry.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry.sentry_dsn,
            traces_sample_rate=settings.sentry.sentry_traces_sample_rate,
            environment=settings.env,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # ── Startup ──────────────────────────────────────────────────────────
        http_client = HttpClient(
            timeout=settings.scoring.data_science_timeout_seconds
        )
        model_client = ModelClient(
            settings.scoring.data_science_api_url, http_client
        )
        fetcher = AccountAnalysisFetcher(model_client)

        app.state.settings = settings
        app.state.http_client = http_client
        app.state.providers = Providers(build_eth_providers(fetcher))
        app.state.platforms = default_platforms()

        yield

        # ── Shutdown ─────────────────────────────────────────────────────────
        await http_client.aclose()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url=settings.docs_url,
        redoc_url=None,
        lifespan=lifespan,
    )

    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(verify_router)

    return app
