"""
Health check endpoint.

GET /health: reports the registered provider types and whether the scoring
service host is configured. The scoring service itself is not called.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from config import AppSettings
from dependencies import get_providers, get_settings
from providers.registry import Providers

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    settings: AppSettings = Depends(get_settings),
    providers: Providers = Depends(get_providers),
) -> JSONResponse:
    scoring_host = settings.scoring.data_science_api_url
    checks = {"scoring": "configured" if scoring_host else "not_configured"}
    overall = "healthy" if scoring_host else "degraded"

    return JSONResponse(
        status_code=200,
        content={"status": overall, "checks": checks, "providers": providers.types},
    )
