"""
Request DTOs for stamp verification.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RequestPayload(BaseModel):
    """Body of POST /api/v1/verify, and the payload every provider receives.

    ``type`` checks a single provider; ``types`` checks several against one
    shared context. If both are given they are merged, ``type`` first.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    address: str = Field(min_length=1)
    type: Optional[str] = None
    types: list[str] = Field(default_factory=list)
    version: str = "0.0.0"

    def requested_types(self) -> list[str]:
        requested: list[str] = []
        for provider_type in ([self.type] if self.type else []) + self.types:
            if provider_type not in requested:
                requested.append(provider_type)
        return requested
