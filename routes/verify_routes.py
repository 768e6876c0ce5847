"""
Stamp verification endpoints.

POST /api/v1/verify     - check one or more provider types for an address
GET  /api/v1/platforms  - list platform bindings and their provider types

All requested types run against one ProviderContext, so the scoring model is
called at most once per request. A model failure aborts the whole request
with a 502 (ModelUnavailableError); a failed check is a normal 200 result.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dependencies import get_platforms, get_provider_context, get_providers
from errors import ValidationError
from platforms.protocol import Platform
from providers.registry import Providers
from schemas.dto.requests.verify import RequestPayload
from schemas.dto.responses.verify import PlatformInfo, VerifyResponse
from schemas.models.context import ProviderContext
from shared.logging import get_logger, log_with_context, mask_address

log = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["verify"])


@router.post("/verify", response_model=VerifyResponse)
async def verify(
    payload: RequestPayload,
    providers: Providers = Depends(get_providers),
    context: ProviderContext = Depends(get_provider_context),
) -> VerifyResponse:
    requested = payload.requested_types()
    if not requested:
        raise ValidationError("At least one provider type is required", field="type")

    request_log = log_with_context(log, address=mask_address(payload.address))
    results = await providers.verify_many(requested, payload, context)
    request_log.info(
        "verify_completed",
        requested=len(requested),
        valid=sum(1 for r in results.values() if r.valid),
    )

    return VerifyResponse(
        address=payload.address,
        results={t: r.to_response() for t, r in results.items()},
    )


@router.get("/platforms", response_model=list[PlatformInfo])
async def list_platforms(
    platforms: list[Platform] = Depends(get_platforms),
) -> list[PlatformInfo]:
    return [
        PlatformInfo(
            platform_id=p.platform_id,
            path=p.path,
            providers=list(p.provider_types),
        )
        for p in platforms
    ]
