"""Data classes and schemas for node runs."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


@dataclass
class CircuitBreakerConfig:
    """Circuit breaker configuration."""
    failure_threshold: int = 5
    recovery_timeout: float = 30.0
    half_open_max_calls: int = 3


@dataclass
class RetryConfig:
    """Retry configuration."""
    max_attempts: int = 3
    base_delay: float = 0.5
    max_delay: float = 10.0
    exponential_base: float = 2.0


@dataclass(frozen=True)
class Credential:
    """Run-scoped Soroswap API credential."""
    api_key: str
    base_url: str

    def __repr__(self) -> str:
        return f"Credential(api_key='***', base_url={self.base_url!r})"


@dataclass(frozen=True)
class Item:
    """One workflow input item and the parameters configured for it."""
    index: int
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def get_parameter(self, name: str, default: Any = None) -> Any:
        return self.parameters.get(name, default)


@dataclass(frozen=True)
class DispatchResult(ABC):
    """Outcome recorded for one item."""
    item_index: int

    @property
    @abstractmethod
    def ok(self) -> bool:
        pass

    @abstractmethod
    def to_item(self) -> Dict[str, Any]:
        """Render the result as a host output item."""
        pass


@dataclass(frozen=True)
class Success(DispatchResult):
    payload: Any = None

    @property
    def ok(self) -> bool:
        return True

    def to_item(self) -> Dict[str, Any]:
        return {"json": self.payload, "paired_item": self.item_index}


@dataclass(frozen=True)
class Failure(DispatchResult):
    error: str = ""
    code: Optional[str] = None

    @property
    def ok(self) -> bool:
        return False

    def to_item(self) -> Dict[str, Any]:
        return {
            "json": {"error": self.error},
            "error": self.error,
            "code": self.code,
            "paired_item": self.item_index,
        }
