"""Client for the data science scoring service.

Every model lives under its own sub-path on one host, e.g.
``http://<host>/eth-stamp-v2-predict``. A request is a JSON body holding only
the address; the response shape depends on the model, so this layer hands back
the decoded JSON and leaves validation to the caller.

Failures are never retried here: any transport error, non-2xx status or
undecodable body becomes a ModelUnavailableError.
"""

from typing import Any, Optional

import httpx

from errors import ModelUnavailableError
from infrastructure.http_client import HttpClient
from shared.logging import get_logger, mask_address

log = get_logger(__name__)


class ModelClient:
    def __init__(self, host: Optional[str], http_client: HttpClient) -> None:
        self._host = host
        self._http = http_client

    @property
    def host(self) -> Optional[str]:
        return self._host

    def model_url(self, url_subpath: str) -> str:
        return f"http://{self._host}/{url_subpath}"

    async def fetch_model_data(self, address: str, url_subpath: str) -> Any:
        url = self.model_url(url_subpath)
        try:
            response = await self._http.post(url, json={"address": address})
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            log.error(
                "model_request_failed",
                url_subpath=url_subpath,
                host=self._host,
                address=mask_address(address),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise ModelUnavailableError(url_subpath, self._host) from e
