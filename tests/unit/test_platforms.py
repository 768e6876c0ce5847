"""Unit tests for the no-OAuth platform bindings."""

import pytest

from platforms.bindings import EnsPlatform, EthPlatform, default_platforms
from providers.eth import ETH_PROVIDER_CONFIGS


class TestEnsPlatform:
    def test_identity(self):
        platform = EnsPlatform()
        assert platform.platform_id == "Ens"
        assert platform.path == "Ens"
        assert platform.client_id is None
        assert platform.redirect_uri is None

    @pytest.mark.parametrize("app_context", [{}, {"state": "abc", "code": "xyz"}])
    async def test_provider_payload_is_empty(self, app_context):
        assert await EnsPlatform().get_provider_payload(app_context) == {}

    async def test_oauth_url_not_implemented(self):
        with pytest.raises(NotImplementedError, match="Method not implemented."):
            await EnsPlatform().get_oauth_url("state")


class TestEthPlatform:
    def test_lists_eth_provider_types(self):
        assert EthPlatform.provider_types == tuple(c.type for c in ETH_PROVIDER_CONFIGS)

    async def test_oauth_url_not_implemented(self):
        with pytest.raises(NotImplementedError):
            await EthPlatform().get_oauth_url("state")


def test_default_platforms():
    assert [p.platform_id for p in default_platforms()] == ["Ens", "ETH"]
