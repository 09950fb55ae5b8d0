"""Soroswap DEX operations for workflow items."""

from .config.settings import NodeConfig, get_config
from .node import execute
from .services.dispatch_service import DispatchService
from .services.http_client import SoroswapClient

__version__ = "1.0.0"

__all__ = ["DispatchService", "NodeConfig", "SoroswapClient", "execute", "get_config"]
