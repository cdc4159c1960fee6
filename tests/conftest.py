"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio
from okex_rest.config import Config
from okex_rest.exchange.client import OkexClient

BASE_URL = "https://www.okex.com"


@pytest.fixture
def config() -> Config:
    """Config with test credentials."""
    return Config(
        okex_api_key="test-key",
        okex_api_secret="test-secret",
        okex_base_url=BASE_URL,
        symbol="btc_usd",
    )


@pytest.fixture
def config_public() -> Config:
    """Config without credentials (public endpoints only)."""
    return Config(okex_api_key="", okex_api_secret="", okex_base_url=BASE_URL)


@pytest.fixture
def sent() -> list[httpx.Request]:
    """Requests that reached the mock transport."""
    return []


@pytest.fixture
def mock_transport(
    sent: list[httpx.Request],
) -> Callable[..., httpx.MockTransport]:
    """Factory for a MockTransport that records requests and returns a canned reply."""

    def _factory(
        *,
        status_code: int = 200,
        json: Any = None,
        text: str | None = None,
        exc: Exception | None = None,
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            if exc is not None:
                raise exc
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json={"result": True} if json is None else json)

        return httpx.MockTransport(handler)

    return _factory


@pytest_asyncio.fixture
async def make_client(
    mock_transport: Callable[..., httpx.MockTransport],
) -> AsyncIterator[Callable[..., OkexClient]]:
    """Factory for an OkexClient wired to the mock transport; clients are closed after the test."""
    clients: list[OkexClient] = []

    def _factory(
        api_key: str = "test-key",
        api_secret: str = "test-secret",
        **reply: Any,
    ) -> OkexClient:
        client = OkexClient(
            api_key=api_key,
            api_secret=api_secret,
            base_url=BASE_URL,
            transport=mock_transport(**reply),
        )
        clients.append(client)
        return client

    yield _factory

    for client in clients:
        await client.close()
