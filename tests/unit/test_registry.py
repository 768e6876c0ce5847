"""Unit tests for the Providers registry."""

from unittest.mock import AsyncMock

import pytest

from providers.eth import build_eth_providers
from providers.registry import MISSING_PROVIDER_MESSAGE, Providers
from schemas.dto.requests.verify import RequestPayload
from schemas.dto.responses.verify import VerifiedPayload
from schemas.models.context import ProviderContext

ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


def _stub_provider(provider_type: str, result: VerifiedPayload):
    provider = AsyncMock()
    provider.type = provider_type
    provider.verify = AsyncMock(return_value=result)
    return provider


class TestProviders:
    def test_types_in_registration_order(self, fetcher):
        providers = Providers(build_eth_providers(fetcher))
        assert providers.types == [
            "ETHScore#50",
            "ETHScore#75",
            "ETHScore#90",
            "ETHDaysActive#50",
            "ETHGasSpent#0.25",
            "ETHnumTransactions#100",
        ]

    def test_duplicate_type_rejected(self):
        ok = VerifiedPayload.success(ADDRESS)
        with pytest.raises(ValueError, match="Duplicate provider type"):
            Providers([_stub_provider("A", ok), _stub_provider("A", ok)])

    async def test_verify_dispatches_by_type(self):
        ok = VerifiedPayload.success(ADDRESS)
        a = _stub_provider("A", ok)
        b = _stub_provider("B", VerifiedPayload.failure("nope"))
        providers = Providers([a, b])
        payload = RequestPayload(address=ADDRESS)
        context = ProviderContext()

        result = await providers.verify("A", payload, context)

        assert result == ok
        a.verify.assert_awaited_once_with(payload, context)
        b.verify.assert_not_awaited()

    async def test_unknown_type_is_invalid_result(self):
        providers = Providers([])
        result = await providers.verify(
            "Nope#1", RequestPayload(address=ADDRESS), ProviderContext()
        )
        assert result.valid is False
        assert result.errors == [MISSING_PROVIDER_MESSAGE]

    async def test_verify_many_shares_one_fetch(self, fetcher, fake_model):
        providers = Providers(build_eth_providers(fetcher))
        fake_model.respond_with(human_probability=76)

        results = await providers.verify_many(
            ["ETHScore#50", "ETHScore#75", "ETHScore#90", "Unknown"],
            RequestPayload(address=ADDRESS),
            ProviderContext(),
        )

        assert list(results) == ["ETHScore#50", "ETHScore#75", "ETHScore#90", "Unknown"]
        assert results["ETHScore#50"].valid
        assert results["ETHScore#75"].valid
        assert not results["ETHScore#90"].valid
        assert results["Unknown"].errors == [MISSING_PROVIDER_MESSAGE]
        assert len(fake_model.calls) == 1
