"""
Operations exposed by the Soroswap node.

The set is closed: ``ALL_OPERATIONS`` lists one class per ``OperationName``.
"""

from .base import Operation
from .liquidity import AddLiquidityOperation, GetUserPositionsOperation, RemoveLiquidityOperation
from .market import (
    GetAssetListOperation,
    GetContractAddressOperation,
    GetPriceOperation,
    GetProtocolsOperation,
)
from .pools import GetPoolByTokensOperation, GetPoolsOperation
from .trading import BuildOperation, QuoteOperation, SendOperation

ALL_OPERATIONS = (
    GetProtocolsOperation,
    QuoteOperation,
    BuildOperation,
    SendOperation,
    GetPoolsOperation,
    GetPoolByTokensOperation,
    AddLiquidityOperation,
    RemoveLiquidityOperation,
    GetUserPositionsOperation,
    GetAssetListOperation,
    GetPriceOperation,
    GetContractAddressOperation,
)

__all__ = [
    "Operation",
    "ALL_OPERATIONS",
    "GetProtocolsOperation",
    "QuoteOperation",
    "BuildOperation",
    "SendOperation",
    "GetPoolsOperation",
    "GetPoolByTokensOperation",
    "AddLiquidityOperation",
    "RemoveLiquidityOperation",
    "GetUserPositionsOperation",
    "GetAssetListOperation",
    "GetPriceOperation",
    "GetContractAddressOperation",
]
