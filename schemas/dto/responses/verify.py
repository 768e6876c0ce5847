"""
Response DTOs for stamp verification.

VerifiedPayload  - outcome of one provider check
VerifyResponse   - POST /api/v1/verify, one VerifiedPayload per requested type
PlatformInfo     - GET /api/v1/platforms entry
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class VerifiedPayload(BaseModel):
    """Either ``{valid: true, record: {address}}`` or ``{valid: false, errors: [..]}``.

    Build instances through success() / failure() so no other shape can occur.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    record: Optional[dict[str, str]] = None
    errors: Optional[list[str]] = None

    @classmethod
    def success(cls, address: str) -> "VerifiedPayload":
        return cls(valid=True, record={"address": address})

    @classmethod
    def failure(cls, *messages: str) -> "VerifiedPayload":
        return cls(valid=False, errors=list(messages))

    def to_response(self) -> dict:
        return self.model_dump(exclude_none=True)


class VerifyResponse(BaseModel):
    address: str
    results: dict[str, dict]


class PlatformInfo(BaseModel):
    platform_id: str
    path: str
    providers: list[str]
