"""
Shared test fixtures.

The scoring model is faked with httpx.MockTransport plugged into HttpClient,
so requests go through the real httpx stack without touching the network.
Every handler call is recorded on ``model_calls`` for call-count assertions.
"""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from infrastructure.http_client import HttpClient
from infrastructure.model_client import ModelClient
from services.account_analysis import AccountAnalysisFetcher

MODEL_HOST = "ds.test:8000"


def model_body(
    human_probability: float = 80,
    gas_spent: float = 1.0,
    n_days_active: int = 60,
    n_transactions: int = 150,
) -> dict[str, Any]:
    return {
        "data": {
            "human_probability": human_probability,
            "gas_spent": gas_spent,
            "n_days_active": n_days_active,
            "n_transactions": n_transactions,
        }
    }


class FakeModel:
    """Records requests and answers with a configurable responder."""

    def __init__(self) -> None:
        self.calls: list[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=model_body())
        )

    def respond_with(self, **fields: Any) -> None:
        body = model_body(**fields)
        self.responder = lambda request: httpx.Response(200, json=body)

    def fail_with(self, exc_factory: Callable[[httpx.Request], Exception]) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc_factory(request)

        self.responder = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        return self.responder(request)

    def request_bodies(self) -> list[dict]:
        return [json.loads(call.content) for call in self.calls]


@pytest.fixture(autouse=True)
def isolate_dotenv(tmp_path, monkeypatch):
    """Run every test from an empty directory so no real .env is picked up."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_model() -> FakeModel:
    return FakeModel()


@pytest.fixture
async def http_client(fake_model):
    client = HttpClient(transport=httpx.MockTransport(fake_model.handler))
    yield client
    await client.aclose()


@pytest.fixture
def model_client(http_client) -> ModelClient:
    return ModelClient(MODEL_HOST, http_client)


@pytest.fixture
def fetcher(model_client) -> AccountAnalysisFetcher:
    return AccountAnalysisFetcher(model_client)


@pytest.fixture
def model_host() -> str:
    return MODEL_HOST
