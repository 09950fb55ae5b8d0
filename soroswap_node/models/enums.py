"""Enumerations for networks, operations and Soroswap API options."""

from enum import Enum


class Network(str, Enum):
    """Soroswap deployments."""
    MAINNET = "MAINNET"
    TESTNET = "TESTNET"

    @property
    def wire_value(self) -> str:
        return self.value.lower()


class OperationName(str, Enum):
    """Operations the node can dispatch."""
    GET_PROTOCOLS = "getProtocols"
    QUOTE = "quote"
    BUILD = "build"
    SEND = "send"
    GET_POOLS = "getPools"
    GET_POOL_BY_TOKENS = "getPoolByTokens"
    ADD_LIQUIDITY = "addLiquidity"
    REMOVE_LIQUIDITY = "removeLiquidity"
    GET_USER_POSITIONS = "getUserPositions"
    GET_ASSET_LIST = "getAssetList"
    GET_PRICE = "getPrice"
    GET_CONTRACT_ADDRESS = "getContractAddress"


class TradeType(str, Enum):
    """Quote trade direction."""
    EXACT_IN = "EXACT_IN"
    EXACT_OUT = "EXACT_OUT"


class Protocol(str, Enum):
    """Trading protocols aggregated by Soroswap. Values are the API's names."""
    SOROSWAP = "soroswap"
    PHOENIX = "phoenix"
    AQUA = "aqua"
    SDEX = "sdex"


class AssetListName(str, Enum):
    """Curated asset lists."""
    AQUA = "AQUA"
    LOBSTR = "LOBSTR"
    SOROSWAP = "SOROSWAP"
    STELLAR_EXPERT = "STELLAR_EXPERT"


class ContractName(str, Enum):
    """Soroswap contracts with a published address."""
    FACTORY = "factory"
    ROUTER = "router"
    AGGREGATOR = "aggregator"


class CircuitBreakerState(Enum):
    """Circuit breaker states."""
    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"
