"""Platform bindings for stamps that need no OAuth handshake.

Ens and ETH stamps are verified from the wallet address alone, so these
bindings have nothing to add to the provider payload and no OAuth URL to
build. They exist to satisfy the Platform contract.
"""

from typing import Any, Optional

from providers.eth import ETH_PROVIDER_CONFIGS


class NoOAuthPlatform:
    platform_id: str = ""
    path: str = ""
    provider_types: tuple[str, ...] = ()

    def __init__(self) -> None:
        self.client_id: Optional[str] = None
        self.redirect_uri: Optional[str] = None

    async def get_provider_payload(self, app_context: dict[str, Any]) -> dict[str, Any]:
        return {}

    async def get_oauth_url(self, state: str) -> str:
        raise NotImplementedError("Method not implemented.")


class EnsPlatform(NoOAuthPlatform):
    platform_id = "Ens"
    path = "Ens"


class EthPlatform(NoOAuthPlatform):
    platform_id = "ETH"
    path = "ETH"
    provider_types = tuple(config.type for config in ETH_PROVIDER_CONFIGS)


def default_platforms() -> list[NoOAuthPlatform]:
    return [EnsPlatform(), EthPlatform()]
