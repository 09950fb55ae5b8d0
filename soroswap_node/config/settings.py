"""Node configuration management."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.enums import Network


class NodeConfig(BaseSettings):
    """Node configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="SOROSWAP_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    api_key: str = Field(default="")
    base_url: str = Field(default="https://api.soroswap.finance")

    # Run defaults
    network: Network = Field(default=Network.MAINNET)
    continue_on_fail: bool = Field(default=False)
    max_concurrency: int = Field(default=1, ge=1, le=64)

    # HTTP
    request_timeout: float = Field(default=30.0, gt=0)

    # Circuit breaker configuration
    circuit_breaker_failure_threshold: int = Field(default=5, ge=1)
    circuit_breaker_recovery_timeout: float = Field(default=30.0, ge=0)
    circuit_breaker_half_open_max_calls: int = Field(default=3, ge=1)

    # Retry configuration (read-only requests only)
    retry_max_attempts: int = Field(default=3, ge=1)
    retry_base_delay: float = Field(default=0.5, ge=0)
    retry_max_delay: float = Field(default=10.0, ge=0)
    retry_exponential_base: float = Field(default=2.0, ge=1)


# Global config instance
_config: Optional[NodeConfig] = None


def get_config() -> NodeConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = NodeConfig()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next access re-reads the environment."""
    global _config
    _config = None
