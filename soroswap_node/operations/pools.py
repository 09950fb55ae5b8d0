"""Pool lookups."""

from ..models.enums import OperationName
from . import parameters as p
from .base import Operation


def _lowercase_protocols(protocols):
    return [protocol.name.lower() for protocol in protocols]


class GetPoolsOperation(Operation):
    """List pools for the selected protocols."""

    parameters = (p.protocols(),)

    @property
    def name(self) -> OperationName:
        return OperationName.GET_POOLS

    @property
    def description(self) -> str:
        return "Get pools for protocols"

    async def execute(self, client, params, network):
        return await client.get_pools(network, _lowercase_protocols(params["protocols"]))


class GetPoolByTokensOperation(Operation):
    """Fetch the pool for a specific token pair."""

    parameters = (
        p.string("assetA"),
        p.string("assetB"),
        p.protocols(),
    )

    @property
    def name(self) -> OperationName:
        return OperationName.GET_POOL_BY_TOKENS

    @property
    def description(self) -> str:
        return "Get pool for specific token pair"

    async def execute(self, client, params, network):
        return await client.get_pool_by_tokens(
            params["assetA"],
            params["assetB"],
            network,
            _lowercase_protocols(params["protocols"]),
        )
