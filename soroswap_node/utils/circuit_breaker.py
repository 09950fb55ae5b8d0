"""Circuit breaker implementation for fault tolerance."""

import time

import structlog

from ..models.enums import CircuitBreakerState
from ..models.schemas import CircuitBreakerConfig

logger = structlog.get_logger(__name__)


class CircuitBreaker:
    """Circuit breaker for handling repeated API failures."""

    def __init__(self, config: CircuitBreakerConfig, name: str = "soroswap-api"):
        self.config = config
        self.name = name
        self.failure_count = 0
        self.last_failure_time = 0.0
        self.state = CircuitBreakerState.CLOSED
        self.half_open_calls = 0

    def can_execute(self) -> bool:
        """Check if a call can be made."""
        if self.state == CircuitBreakerState.CLOSED:
            return True
        elif self.state == CircuitBreakerState.OPEN:
            if time.monotonic() - self.last_failure_time > self.config.recovery_timeout:
                self.state = CircuitBreakerState.HALF_OPEN
                self.half_open_calls = 0
                logger.info("Circuit breaker entering half-open state", breaker=self.name)
                return True
            return False
        else:  # half_open
            if self.half_open_calls < self.config.half_open_max_calls:
                self.half_open_calls += 1
                return True
            return False

    def record_success(self):
        """Record successful call."""
        if self.state == CircuitBreakerState.HALF_OPEN:
            logger.info("Circuit breaker reset to closed state", breaker=self.name)
        self.state = CircuitBreakerState.CLOSED
        self.failure_count = 0
        self.half_open_calls = 0

    def record_failure(self):
        """Record failed call."""
        self.failure_count += 1
        self.last_failure_time = time.monotonic()

        if self.state == CircuitBreakerState.HALF_OPEN:
            self.state = CircuitBreakerState.OPEN
            logger.warning("Circuit breaker failed in half-open state, returning to open", breaker=self.name)
        elif self.state == CircuitBreakerState.CLOSED and self.failure_count >= self.config.failure_threshold:
            self.state = CircuitBreakerState.OPEN
            logger.warning("Circuit breaker opened", breaker=self.name, failures=self.failure_count)

    def get_state_info(self) -> dict:
        """Get circuit breaker state information."""
        return {
            "state": self.state.value,
            "failure_count": self.failure_count,
            "last_failure_time": self.last_failure_time,
            "half_open_calls": self.half_open_calls,
        }
