"""Configuration module for the Soroswap node."""

from .settings import NodeConfig, get_config, reset_config

__all__ = ["NodeConfig", "get_config", "reset_config"]
