"""
FastAPI dependency providers.

Everything injectable is built once in create_app()'s lifespan and stored on
app.state; these functions only hand it out.
"""

from __future__ import annotations

from fastapi import Request

from config import AppSettings
from platforms.protocol import Platform
from providers.registry import Providers
from schemas.models.context import ProviderContext


def get_settings(request: Request) -> AppSettings:
    """Return the AppSettings instance stored on app.state."""
    return request.app.state.settings


def get_providers(request: Request) -> Providers:
    return request.app.state.providers


def get_platforms(request: Request) -> list[Platform]:
    return request.app.state.platforms


def get_provider_context() -> ProviderContext:
    """A fresh context per request, shared by every provider that request checks."""
    return ProviderContext()
