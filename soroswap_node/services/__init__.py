"""Service modules for node functionality."""

from .credential_service import CredentialService, resolve_credential
from .dispatch_service import DispatchService, to_items
from .http_client import SoroswapClient
from .operation_service import OperationService

__all__ = [
    "CredentialService",
    "DispatchService",
    "OperationService",
    "SoroswapClient",
    "resolve_credential",
    "to_items",
]
