"""Utility modules for node functionality."""

from .circuit_breaker import CircuitBreaker
from .retry import RetryHandler
from .logging import setup_logging

__all__ = ["CircuitBreaker", "RetryHandler", "setup_logging"]
