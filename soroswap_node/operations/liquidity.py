"""Liquidity operations."""

import structlog

from ..models.enums import OperationName
from . import parameters as p
from .base import Operation

logger = structlog.get_logger(__name__)


class AddLiquidityOperation(Operation):
    """Add liquidity to a pool."""

    parameters = (
        p.string("assetA"),
        p.string("assetB"),
        p.decimal_integer("amountA"),
        p.decimal_integer("amountB"),
        p.string("to"),
    )

    @property
    def name(self) -> OperationName:
        return OperationName.ADD_LIQUIDITY

    @property
    def description(self) -> str:
        return "Add liquidity to pool"

    async def execute(self, client, params, network):
        return await client.add_liquidity(
            {
                "assetA": params["assetA"],
                "assetB": params["assetB"],
                "amountA": params["amountA"],
                "amountB": params["amountB"],
                "to": params["to"],
            },
            network,
        )


class RemoveLiquidityOperation(Operation):
    """
    Remove liquidity from a pool.

    The minimum amounts out default to zero, which gives no slippage
    protection. Set ``amountAMin``/``amountBMin`` to bound them.
    """

    parameters = (
        p.string("assetA"),
        p.string("assetB"),
        p.decimal_integer("liquidity"),
        p.string("to"),
        p.decimal_integer("amountAMin", default="0"),
        p.decimal_integer("amountBMin", default="0"),
    )

    @property
    def name(self) -> OperationName:
        return OperationName.REMOVE_LIQUIDITY

    @property
    def description(self) -> str:
        return "Remove liquidity from pool"

    async def execute(self, client, params, network):
        if params["amountAMin"] == 0 and params["amountBMin"] == 0:
            logger.warning(
                "Removing liquidity without minimum amounts out",
                asset_a=params["assetA"],
                asset_b=params["assetB"],
            )
        return await client.remove_liquidity(
            {
                "assetA": params["assetA"],
                "assetB": params["assetB"],
                "liquidity": params["liquidity"],
                "amountA": params["amountAMin"],
                "amountB": params["amountBMin"],
                "to": params["to"],
            },
            network,
        )


class GetUserPositionsOperation(Operation):
    """Fetch a wallet's liquidity positions."""

    parameters = (p.string("address"),)

    @property
    def name(self) -> OperationName:
        return OperationName.GET_USER_POSITIONS

    @property
    def description(self) -> str:
        return "Get user liquidity positions"

    async def execute(self, client, params, network):
        return await client.get_user_positions(params["address"], network)
