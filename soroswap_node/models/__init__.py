"""Models and data structures for the node."""

from .enums import (
    AssetListName,
    CircuitBreakerState,
    ContractName,
    Network,
    OperationName,
    Protocol,
    TradeType,
)
from .schemas import (
    CircuitBreakerConfig,
    Credential,
    DispatchResult,
    Failure,
    Item,
    RetryConfig,
    Success,
)

__all__ = [
    "AssetListName",
    "CircuitBreakerState",
    "ContractName",
    "Network",
    "OperationName",
    "Protocol",
    "TradeType",
    "CircuitBreakerConfig",
    "Credential",
    "DispatchResult",
    "Failure",
    "Item",
    "RetryConfig",
    "Success",
]
