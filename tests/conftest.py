"""Shared fixtures for Soroswap node tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from aiohttp import ClientSession

from soroswap_node.config.settings import NodeConfig
from soroswap_node.models.schemas import Credential, Item
from soroswap_node.services.http_client import SoroswapClient


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer SOROSWAP_* variables out of the tests."""
    for var in ("SOROSWAP_API_KEY", "SOROSWAP_BASE_URL", "SOROSWAP_NETWORK",
                "SOROSWAP_CONTINUE_ON_FAIL", "SOROSWAP_MAX_CONCURRENCY"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def node_config():
    """Configuration with a valid key and no retry delays."""
    return NodeConfig(
        _env_file=None,
        api_key="sk_test_123",
        base_url="https://api.soroswap.test",
        retry_base_delay=0,
        retry_max_delay=0,
    )


@pytest.fixture
def credential():
    return Credential(api_key="sk_test_123", base_url="https://api.soroswap.test")


@pytest.fixture
def mock_client():
    """Soroswap client double; every API coroutine is an AsyncMock."""
    client = AsyncMock(spec=SoroswapClient)
    client.get_protocols.return_value = ["soroswap", "phoenix", "aqua", "sdex"]
    client.quote.return_value = {"amountIn": "1000", "amountOut": "990"}
    client.get_pools.return_value = [{"protocol": "soroswap"}]
    client.get_price.return_value = [{"asset": "XLM", "price": 0.1}]
    return client


@pytest.fixture
def mock_session():
    """Mock aiohttp session."""
    session = AsyncMock(spec=ClientSession)
    session.closed = False
    return session


def make_response(status=200, data=None, reason="OK"):
    response = MagicMock()
    response.status = status
    response.reason = reason
    response.json = AsyncMock(return_value=data)
    return response


def make_items(*parameter_sets):
    return [Item(index=i, parameters=params) for i, params in enumerate(parameter_sets)]
