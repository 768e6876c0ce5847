"""Provider protocol: the registry and API depend on this, not on concrete providers."""

from typing import Protocol

from schemas.dto.requests.verify import RequestPayload
from schemas.dto.responses.verify import VerifiedPayload
from schemas.models.context import ProviderContext


class Provider(Protocol):
    type: str

    async def verify(
        self, payload: RequestPayload, context: ProviderContext
    ) -> VerifiedPayload: ...
