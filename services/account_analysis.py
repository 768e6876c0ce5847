"""Account analysis fetcher.

Wraps the eth-stamp-v2-predict model behind a per-request memo: the first
provider that needs the analysis for an address triggers the model call, every
later provider in the same ProviderContext reuses the stored EthAnalysis.

The memo is exact. Once ``context.eth_analysis`` is set it is never refetched
or replaced for the life of that context.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from errors import ModelUnavailableError
from infrastructure.model_client import ModelClient
from schemas.models.analysis import EthAnalysis, ModelResponse
from schemas.models.context import ProviderContext
from shared.logging import get_logger, mask_address

log = get_logger(__name__)

ETH_MODEL_SUBPATH = "eth-stamp-v2-predict"


class AccountAnalysisFetcher:
    def __init__(
        self, model_client: ModelClient, url_subpath: str = ETH_MODEL_SUBPATH
    ) -> None:
        self._model = model_client
        self._url_subpath = url_subpath

    @property
    def url_subpath(self) -> str:
        return self._url_subpath

    async def get_analysis(
        self, address: str, context: ProviderContext
    ) -> EthAnalysis:
        """Return the analysis for ``address``, fetching it at most once per context.

        Raises:
            ModelUnavailableError: the model call failed or its body did not
                match ModelResponse. Nothing is cached in that case.
        """
        if context.eth_analysis is not None:
            log.debug("eth_analysis_cache_hit", address=mask_address(address))
            return context.eth_analysis

        async with context.lock:
            # Another provider sharing this context may have filled it while we waited
            if context.eth_analysis is None:
                context.eth_analysis = await self._fetch(address)
        return context.eth_analysis

    async def _fetch(self, address: str) -> EthAnalysis:
        body = await self._model.fetch_model_data(address, self._url_subpath)
        try:
            analysis = ModelResponse.model_validate(body).to_analysis()
        except PydanticValidationError as e:
            log.error(
                "model_request_failed",
                url_subpath=self._url_subpath,
                host=self._model.host,
                address=mask_address(address),
                error="malformed model response",
                error_count=e.error_count(),
            )
            raise ModelUnavailableError(self._url_subpath, self._model.host) from e

        log.info(
            "eth_analysis_fetched",
            address=mask_address(address),
            url_subpath=self._url_subpath,
        )
        return analysis
