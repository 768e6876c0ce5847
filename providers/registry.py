"""Provider registry keyed by stamp type."""

from __future__ import annotations

from typing import Iterable

from providers.protocol import Provider
from schemas.dto.requests.verify import RequestPayload
from schemas.dto.responses.verify import VerifiedPayload
from schemas.models.context import ProviderContext
from shared.logging import get_logger

log = get_logger(__name__)

MISSING_PROVIDER_MESSAGE = "Missing provider"


class Providers:
    def __init__(self, providers: Iterable[Provider]) -> None:
        self._providers: dict[str, Provider] = {}
        for provider in providers:
            if provider.type in self._providers:
                raise ValueError(f"Duplicate provider type: {provider.type}")
            self._providers[provider.type] = provider

    @property
    def types(self) -> list[str]:
        return list(self._providers)

    async def verify(
        self, provider_type: str, payload: RequestPayload, context: ProviderContext
    ) -> VerifiedPayload:
        provider = self._providers.get(provider_type)
        if provider is None:
            log.warning("provider_missing", provider=provider_type)
            return VerifiedPayload.failure(MISSING_PROVIDER_MESSAGE)
        return await provider.verify(payload, context)

    async def verify_many(
        self,
        provider_types: Iterable[str],
        payload: RequestPayload,
        context: ProviderContext,
    ) -> dict[str, VerifiedPayload]:
        """Check each type in order against the same context."""
        results: dict[str, VerifiedPayload] = {}
        for provider_type in provider_types:
            results[provider_type] = await self.verify(provider_type, payload, context)
        return results
