"""
Base interface for all Soroswap node operations.

Every operation declares its parameters statically and knows how to turn
the coerced values into one call on the Soroswap API client.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Mapping, Tuple

from ..models.enums import Network, OperationName
from ..models.schemas import Item
from .parameters import ParameterSpec

if TYPE_CHECKING:
    from ..services.http_client import SoroswapClient


class Operation(ABC):
    """Base class for all node operations."""

    #: Parameters read from each item, in declaration order.
    parameters: Tuple[ParameterSpec, ...] = ()

    @property
    @abstractmethod
    def name(self) -> OperationName:
        """Return the operation identifier."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Return a human-readable description of the operation."""
        pass

    @abstractmethod
    async def execute(self, client: "SoroswapClient", params: Mapping[str, Any], network: Network) -> Any:
        """
        Issue the remote call for this operation.

        Args:
            client: Soroswap API client for the run
            params: Coerced parameters keyed by parameter name
            network: Network selected for the item

        Returns:
            JSON-shaped payload returned by the API

        Raises:
            SoroswapApiError: If the API rejects the request or is unreachable
        """
        pass

    def collect_parameters(self, item: Item) -> Dict[str, Any]:
        """
        Read and coerce every declared parameter from the item.

        Raises:
            ParameterError: naming the first parameter that failed coercion
        """
        params = {}
        for spec in self.parameters:
            if spec.name in item.parameters:
                params[spec.name] = spec.resolve(item.parameters[spec.name])
            else:
                params[spec.name] = spec.resolve()
        return params

    def get_metadata(self) -> Dict[str, Any]:
        """Return operation metadata for listings."""
        return {
            "name": self.name.value,
            "description": self.description,
            "parameters": [
                {
                    "name": spec.name,
                    "type": spec.semantic_type,
                    "required": spec.required and not spec.has_default,
                }
                for spec in self.parameters
            ],
        }
