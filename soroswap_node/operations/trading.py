"""Swap operations: quote, build and send."""

from ..models.enums import OperationName, TradeType
from . import parameters as p
from .base import Operation


class QuoteOperation(Operation):
    """Get a trading quote for a token swap."""

    parameters = (
        p.string("assetIn"),
        p.string("assetOut"),
        p.decimal_integer("amount"),
        p.option("tradeType", TradeType, default=TradeType.EXACT_IN.value),
        p.protocols(),
    )

    @property
    def name(self) -> OperationName:
        return OperationName.QUOTE

    @property
    def description(self) -> str:
        return "Get trading quote for token swap"

    async def execute(self, client, params, network):
        # Protocols go out as enum members, unlike the pool lookups
        return await client.quote(
            {
                "assetIn": params["assetIn"],
                "assetOut": params["assetOut"],
                "amount": params["amount"],
                "tradeType": params["tradeType"],
                "protocols": list(params["protocols"]),
            },
            network,
        )


class BuildOperation(Operation):
    """Build a transaction from a previously obtained quote."""

    parameters = (
        p.json_value("quote", default="{}"),
        p.optional_string("from"),
        p.optional_string("to"),
    )

    @property
    def name(self) -> OperationName:
        return OperationName.BUILD

    @property
    def description(self) -> str:
        return "Build transaction from quote"

    async def execute(self, client, params, network):
        request = {"quote": params["quote"]}
        if params["from"]:
            request["from"] = params["from"]
        if params["to"]:
            request["to"] = params["to"]
        return await client.build(request, network)


class SendOperation(Operation):
    """Submit a signed transaction."""

    parameters = (
        p.string("xdr"),
        p.boolean("launchtube", default=False),
    )

    @property
    def name(self) -> OperationName:
        return OperationName.SEND

    @property
    def description(self) -> str:
        return "Send signed transaction"

    async def execute(self, client, params, network):
        return await client.send(params["xdr"], params["launchtube"], network)
