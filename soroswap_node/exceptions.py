"""Soroswap node exceptions."""

from typing import Any, Dict, Optional


class SoroswapNodeError(Exception):
    """Base exception for node errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for item output."""
        result = {"message": self.message}
        if self.code:
            result["code"] = self.code
        return result


class CredentialError(SoroswapNodeError):
    """Credentials are missing or malformed. Always fatal to the run."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_CREDENTIALS")


class UnknownOperationError(SoroswapNodeError):
    """Raised when an item asks for an operation that is not registered."""

    def __init__(self, operation: Any):
        super().__init__(f"Unknown operation: {operation}", code="UNKNOWN_OPERATION")
        self.operation = operation


class ParameterError(SoroswapNodeError):
    """Raised when a parameter cannot be coerced to its declared type."""

    def __init__(self, parameter: str, reason: str):
        super().__init__(f"Invalid parameter '{parameter}': {reason}", code="INVALID_PARAMETER")
        self.parameter = parameter
        self.reason = reason


class SoroswapApiError(SoroswapNodeError):
    """Raised when the Soroswap API rejects a request or cannot be reached."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message, code="API_ERROR")
        self.status = status

    @property
    def retryable(self) -> bool:
        """Network failures, rate limits and server errors may succeed later."""
        return self.status is None or self.status == 429 or self.status >= 500


class CircuitOpenError(SoroswapApiError):
    """Raised when the client refuses a call because its circuit breaker is open."""

    def __init__(self):
        super().__init__("Soroswap API circuit breaker is open")

    @property
    def retryable(self) -> bool:
        return False


class NodeOperationError(SoroswapNodeError):
    """Failure surfaced to the host when the run is not continuing on failure."""

    def __init__(self, message: str, item_index: int):
        super().__init__(message, code="NODE_OPERATION_ERROR")
        self.item_index = item_index

    def __str__(self) -> str:
        return f"{self.message} [item {self.item_index}]"
