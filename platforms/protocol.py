"""Platform protocol: the structural contract every platform binding satisfies."""

from typing import Any, Optional, Protocol


class Platform(Protocol):
    platform_id: str
    path: str
    client_id: Optional[str]
    redirect_uri: Optional[str]
    provider_types: tuple[str, ...]

    async def get_provider_payload(
        self, app_context: dict[str, Any]
    ) -> dict[str, Any]: ...

    async def get_oauth_url(self, state: str) -> str: ...
