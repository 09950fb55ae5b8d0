"""Protocol, asset list, price and contract lookups."""

from ..models.enums import AssetListName, ContractName, OperationName
from . import parameters as p
from .base import Operation


class GetProtocolsOperation(Operation):
    """List the trading protocols available on a network."""

    @property
    def name(self) -> OperationName:
        return OperationName.GET_PROTOCOLS

    @property
    def description(self) -> str:
        return "Get available trading protocols"

    async def execute(self, client, params, network):
        return await client.get_protocols(network)


class GetAssetListOperation(Operation):
    """Fetch asset list metadata. An empty name asks for all lists."""

    parameters = (p.option("assetListName", AssetListName, allow_empty=True, default=""),)

    @property
    def name(self) -> OperationName:
        return OperationName.GET_ASSET_LIST

    @property
    def description(self) -> str:
        return "Get asset list metadata"

    async def execute(self, client, params, network):
        return await client.get_asset_list(params["assetListName"])


class GetPriceOperation(Operation):
    """Fetch current prices for one or more assets."""

    parameters = (p.comma_list("assets"),)

    @property
    def name(self) -> OperationName:
        return OperationName.GET_PRICE

    @property
    def description(self) -> str:
        return "Get current asset prices"

    async def execute(self, client, params, network):
        assets = list(dict.fromkeys(params["assets"]))
        if len(assets) == 1:
            return await client.get_price(assets[0], network)
        return await client.get_price(assets, network)


class GetContractAddressOperation(Operation):
    """Fetch the address of a Soroswap contract."""

    parameters = (p.option("contractName", ContractName, default=ContractName.FACTORY.value),)

    @property
    def name(self) -> OperationName:
        return OperationName.GET_CONTRACT_ADDRESS

    @property
    def description(self) -> str:
        return "Get contract address for network"

    async def execute(self, client, params, network):
        return await client.get_contract_address(network, params["contractName"])
