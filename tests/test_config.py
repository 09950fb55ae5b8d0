"""Test configuration management."""

from soroswap_node.config.settings import NodeConfig, get_config, reset_config
from soroswap_node.models.enums import Network


def test_node_config_defaults():
    """NodeConfig creates with sensible defaults."""
    config = NodeConfig(_env_file=None)

    assert config.api_key == ""
    assert config.base_url == "https://api.soroswap.finance"
    assert config.network is Network.MAINNET
    assert config.continue_on_fail is False
    assert config.max_concurrency == 1
    assert config.request_timeout == 30.0

    # Circuit breaker defaults
    assert config.circuit_breaker_failure_threshold == 5
    assert config.circuit_breaker_recovery_timeout == 30.0
    assert config.circuit_breaker_half_open_max_calls == 3

    # Retry defaults
    assert config.retry_max_attempts == 3
    assert config.retry_base_delay == 0.5
    assert config.retry_max_delay == 10.0
    assert config.retry_exponential_base == 2.0


def test_node_config_from_environment(monkeypatch):
    monkeypatch.setenv("SOROSWAP_API_KEY", "sk_env")
    monkeypatch.setenv("SOROSWAP_NETWORK", "TESTNET")
    monkeypatch.setenv("SOROSWAP_CONTINUE_ON_FAIL", "true")
    monkeypatch.setenv("SOROSWAP_MAX_CONCURRENCY", "4")

    config = NodeConfig(_env_file=None)

    assert config.api_key == "sk_env"
    assert config.network is Network.TESTNET
    assert config.continue_on_fail is True
    assert config.max_concurrency == 4


def test_get_config_is_cached(monkeypatch):
    reset_config()
    monkeypatch.setenv("SOROSWAP_API_KEY", "sk_first")
    first = get_config()
    monkeypatch.setenv("SOROSWAP_API_KEY", "sk_second")

    assert get_config() is first
    assert get_config().api_key == "sk_first"

    reset_config()
    assert get_config().api_key == "sk_second"
    reset_config()
