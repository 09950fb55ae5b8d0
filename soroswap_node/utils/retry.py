"""Retry logic utilities."""

import asyncio
from typing import Any, Awaitable, Callable

import structlog

from ..exceptions import SoroswapApiError
from ..models.schemas import RetryConfig

logger = structlog.get_logger(__name__)


class RetryHandler:
    """Retries retryable API errors with exponential backoff."""

    def __init__(self, config: RetryConfig):
        self.config = config

    def calculate_delay(self, attempt: int) -> float:
        """Calculate delay for given attempt number."""
        delay = self.config.base_delay * (self.config.exponential_base ** (attempt - 1))
        return min(delay, self.config.max_delay)

    async def execute_with_retry(
        self,
        operation: Callable[..., Awaitable[Any]],
        operation_name: str = "operation",
        *args,
        **kwargs
    ) -> Any:
        """Execute a coroutine function, retrying only errors marked retryable."""
        for attempt in range(1, self.config.max_attempts + 1):
            try:
                result = await operation(*args, **kwargs)
                if attempt > 1:
                    logger.info("Request succeeded after retry", operation=operation_name, attempt=attempt)
                return result

            except SoroswapApiError as e:
                if not e.retryable or attempt >= self.config.max_attempts:
                    if attempt > 1:
                        logger.error(
                            "Request failed after retries",
                            operation=operation_name,
                            attempts=attempt,
                            error=str(e),
                        )
                    raise

                delay = self.calculate_delay(attempt)
                logger.warning(
                    "Request failed, retrying",
                    operation=operation_name,
                    attempt=attempt,
                    delay=round(delay, 2),
                    error=str(e),
                )
                await asyncio.sleep(delay)
